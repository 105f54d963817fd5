# ============================================================================
# src/directive_engine/__init__.py
# ============================================================================
"""
Hybrid advance-directive classification and cost-aware routing engine.

Usage:
    from directive_engine import DirectiveEngine

    engine = DirectiveEngine()
    analysis = await engine.process_directive("patient-1", directive_text)
"""

from .constants import DirectiveType
from .core import (
    ProcessingTier,
    ExtractedDirective,
    DirectiveAnalysis,
    EscalationFailure,
    LexiconStore,
    ProcessingStats,
    StatsTracker,
    AuditSink,
    LoggingAuditSink,
)
from .core.router import EscalationRouter
from .core.engine import DirectiveEngine
from .external import BaseExternalClassifier, create_classifier
from .assessors import RiskAssessment
from .utils.exceptions import (
    DirectiveEngineError,
    InvalidInputError,
    ConfigurationError,
    ExternalClassifierError,
    ExternalClassifierUnavailableError,
    ExternalClassifierResponseError,
)

__version__ = "0.1.0"

__all__ = [
    'DirectiveEngine',
    'DirectiveType',
    'ProcessingTier',
    'ExtractedDirective',
    'DirectiveAnalysis',
    'EscalationFailure',
    'LexiconStore',
    'ProcessingStats',
    'StatsTracker',
    'EscalationRouter',
    'AuditSink',
    'LoggingAuditSink',
    'BaseExternalClassifier',
    'create_classifier',
    'RiskAssessment',
    'DirectiveEngineError',
    'InvalidInputError',
    'ConfigurationError',
    'ExternalClassifierError',
    'ExternalClassifierUnavailableError',
    'ExternalClassifierResponseError',
]
