# ============================================================================
# src/directive_engine/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .directive_types import DirectiveType
from .lexicon import TRIGGER_PHRASES, CONFIDENCE_BOOSTS, CONDITION_RULES
from .terminology import MEDICAL_TERMINOLOGY, COMPLEX_MEDICAL_TERMS
from .markers import (
    CONTRAINDICATION_RULES,
    LEGAL_VALIDITY_BASE,
    LEGAL_VALIDITY_DELTAS,
)
