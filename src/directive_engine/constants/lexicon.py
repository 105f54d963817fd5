# ============================================================================
# src/directive_engine/constants/lexicon.py
# ============================================================================
"""
Default Directive Lexicon
- Trigger phrases per directive type (lowercase, matched as substrings)
- Condition rules per directive type
- Confidence boost markers
"""

from .directive_types import DirectiveType

TRIGGER_PHRASES = {
    DirectiveType.DNR: [
        "do not resuscitate",
        "dnr",
        "no resuscitation",
        "do not revive",
        "no cpr",
        "no life support",
        "no mechanical ventilation",
        "comfort care only",
        "palliative care",
        "end of life",
    ],
    DirectiveType.ORGAN_DONATION: [
        "donate organs",
        "organ donation",
        "donate my",
        "kidney",
        "liver",
        "heart",
        "cornea",
        "tissue donation",
        "transplant",
        "organ harvesting",
    ],
    DirectiveType.DATA_CONSENT: [
        "research",
        "anonymized data",
        "medical research",
        "share data",
        "cancer research",
        "genetic studies",
        "clinical trials",
        "medical studies",
    ],
    DirectiveType.POWER_OF_ATTORNEY: [
        "power of attorney",
        "healthcare proxy",
        "medical decisions",
        "surrogate",
        "healthcare agent",
    ],
    DirectiveType.LIVING_WILL: [
        "living will",
        "advance directive",
        "healthcare directive",
        "medical directive",
        "end-of-life wishes",
    ],
}

# Additive boosts applied to every type's keyword ratio.
# Each entry: (any of these substrings, boost)
CONFIDENCE_BOOSTS = [
    (("i do not want", "i refuse"), 0.10),   # explicit first-person refusal
    (("witnessed", "signed"), 0.05),
    (("sound mind",), 0.05),
]

# Condition rules: (all_of groups, label). Each group is satisfied when any
# of its substrings is present; a rule fires when every group is satisfied.
CONDITION_RULES = {
    DirectiveType.DNR: [
        ((("less than",), ("percent", "%")), "Recovery probability threshold specified"),
        ((("terminal", "end stage"),), "Terminal condition specified"),
        ((("vegetative",),), "Persistent vegetative state specified"),
        ((("comfort care", "palliative"),), "Comfort care preference"),
    ],
    DirectiveType.ORGAN_DONATION: [
        ((("kidney",),), "Kidney donation"),
        ((("liver",),), "Liver donation"),
        ((("heart",),), "Heart donation"),
        ((("cornea",),), "Cornea donation"),
        ((("tissue",),), "Tissue donation"),
    ],
    DirectiveType.DATA_CONSENT: [
        ((("anonymized",),), "Anonymization required"),
        ((("cancer",),), "Cancer research consent"),
        ((("genetic",),), "Genetic research consent"),
        ((("clinical trial",),), "Clinical trial participation"),
    ],
    DirectiveType.POWER_OF_ATTORNEY: [],
    DirectiveType.LIVING_WILL: [],
}
