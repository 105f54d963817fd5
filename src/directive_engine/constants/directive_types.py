# ============================================================================
# src/directive_engine/constants/directive_types.py
# ============================================================================
"""
Directive Types
- Closed set of legally meaningful patient instructions
- Each type owns one trigger list and one threshold in the lexicon
"""

from enum import Enum

class DirectiveType(str, Enum):
    """
    Advance directive types recognised by the classifier.
    Values are the wire names used in analyses and audit records.
    """
    DNR = "DNR"
    ORGAN_DONATION = "ORGAN_DONATION"
    DATA_CONSENT = "DATA_CONSENT"
    POWER_OF_ATTORNEY = "POWER_OF_ATTORNEY"
    LIVING_WILL = "LIVING_WILL"
