# ============================================================================
# src/directive_engine/core/context/enums.py
# ============================================================================
"""
Processing Enums
- Processing tiers
"""

from enum import Enum

class ProcessingTier(str, Enum):
    LOCAL = "LOCAL"     # accepted from keyword signals alone
    HYBRID = "HYBRID"   # escalation to the external classifier was attempted
