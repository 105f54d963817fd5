from .risk_assessor import RiskAssessor, RiskAssessment

__all__ = ['RiskAssessor', 'RiskAssessment']
