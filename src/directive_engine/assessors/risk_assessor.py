# ============================================================================
# src/directive_engine/assessors/risk_assessor.py
# ============================================================================
"""
Patient Risk Assessor

Heuristic recovery-probability estimate used alongside directive analysis
when a clinician asks whether a directive's conditions are likely met.

Starts from a 0.5 base and multiplies in a factor per finding in the
current condition or the medical history. The result is kept inside
[0.01, 0.99] so it never reads as certain.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
import logging

from ..utils.text_normalizer import normalize_text

logger = logging.getLogger(__name__)

BASE_RECOVERY_PROBABILITY = 0.5

# (any of these substrings, multiplier, risk factor, contraindication, action)
CONDITION_RISK_RULES: List[Tuple[Tuple[str, ...], float, str, str, str]] = [
    (("cardiac arrest", "heart attack"), 0.3, "Cardiac event", "", "Immediate cardiac intervention"),
    (("respiratory failure",), 0.4, "Respiratory compromise", "", "Ventilatory support assessment"),
    (("stroke", "brain injury"), 0.6, "Neurological damage", "Cognitive impairment risk", ""),
]

HISTORY_RISK_RULES: List[Tuple[Tuple[str, ...], float, str, str, str]] = [
    (("elderly", "age"), 0.8, "Advanced age", "", ""),
    (("diabetes",), 0.9, "Diabetes mellitus", "", ""),
    (("cancer",), 0.7, "Oncological condition", "Immunocompromised state", ""),
]


@dataclass
class RiskAssessment:
    recovery_probability: float
    confidence_score: float
    risk_factors: List[str] = field(default_factory=list)
    contraindications: List[str] = field(default_factory=list)
    recommended_actions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recovery_probability": self.recovery_probability,
            "confidence_score": self.confidence_score,
            "risk_factors": list(self.risk_factors),
            "contraindications": list(self.contraindications),
            "recommended_actions": list(self.recommended_actions),
        }


class RiskAssessor:

    def assess(self, medical_history: str, current_condition: str) -> RiskAssessment:
        condition = normalize_text(current_condition)
        history = normalize_text(medical_history)

        probability = BASE_RECOVERY_PROBABILITY
        risk_factors: List[str] = []
        contraindications: List[str] = []
        actions: List[str] = []

        for text, rules in ((condition, CONDITION_RISK_RULES), (history, HISTORY_RISK_RULES)):
            for markers, multiplier, factor, contraindication, action in rules:
                if not any(marker in text for marker in markers):
                    continue
                probability *= multiplier
                risk_factors.append(factor)
                if contraindication:
                    contraindications.append(contraindication)
                if action:
                    actions.append(action)

        probability = max(0.01, min(probability, 0.99))

        if len(risk_factors) > 2 and medical_history:
            confidence = 0.85
        elif risk_factors:
            confidence = 0.75
        else:
            confidence = 0.60

        logger.debug(
            f"Risk assessment: {len(risk_factors)} factor(s), "
            f"recovery probability {probability:.3f}"
        )

        return RiskAssessment(
            recovery_probability=probability,
            confidence_score=confidence,
            risk_factors=risk_factors,
            contraindications=contraindications,
            recommended_actions=actions,
        )
