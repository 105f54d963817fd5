# ============================================================================
# src/directive_engine/constants/markers.py
# ============================================================================
"""
Textual markers independent of directive type
- Contraindication rules
- Legal validity deltas
"""

# (all_of groups, label) - same shape as CONDITION_RULES
CONTRAINDICATION_RULES = [
    ((("religious",), ("objection",)), "Religious objections noted"),
    ((("family",), ("disagree", "oppose")), "Family disagreement potential"),
    ((("uncertain", "maybe", "might"),), "Uncertain language detected"),
    ((("coerced", "forced", "pressure"),), "Potential coercion indicators"),
]

LEGAL_VALIDITY_BASE = 0.5

# (any of these substrings, delta)
LEGAL_VALIDITY_DELTAS = [
    # Positive indicators
    (("sound mind",), 0.20),
    (("witness",), 0.15),
    (("signature", "signed"), 0.10),
    (("date",), 0.05),
    (("notarized",), 0.10),
    # Negative indicators
    (("coerced", "forced"), -0.30),
    (("unclear", "confused"), -0.20),
    (("under influence",), -0.25),
]
