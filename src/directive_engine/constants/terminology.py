# ============================================================================
# src/directive_engine/constants/terminology.py
# ============================================================================
"""
Medical Terminology
- Category taxonomy used to annotate extracted directives
- Complex terms that force human review
"""

MEDICAL_TERMINOLOGY = {
    "cardiovascular": [
        "myocardial infarction",
        "cardiac arrest",
        "heart failure",
        "arrhythmia",
        "coronary artery disease",
    ],
    "respiratory": [
        "respiratory failure",
        "pneumonia",
        "copd",
        "pulmonary embolism",
        "acute respiratory distress",
    ],
    "neurological": [
        "stroke",
        "cerebrovascular accident",
        "traumatic brain injury",
        "coma",
        "persistent vegetative state",
        "brain death",
    ],
    "oncological": [
        "cancer",
        "malignancy",
        "metastasis",
        "chemotherapy",
        "radiation therapy",
        "terminal cancer",
    ],
}

COMPLEX_MEDICAL_TERMS = [
    "myocardial infarction",
    "cerebrovascular accident",
    "pulmonary embolism",
    "sepsis",
    "multi-organ failure",
    "intracranial pressure",
    "glasgow coma scale",
    "acute respiratory distress syndrome",
    "disseminated intravascular coagulation",
]
