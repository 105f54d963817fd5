# ============================================================================
# src/directive_engine/core/context/extracted_directive.py
# ============================================================================
"""
Single extracted directive
- Directive type with its confidence
- Conditions and terminology annotations
- Provenance (which trigger phrases matched)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ...constants.directive_types import DirectiveType

@dataclass
class ExtractedDirective:
    directive_type: DirectiveType
    confidence: float = 0.0
    conditions: List[str] = field(default_factory=list)

    # Provenance: matched trigger phrases joined by ", "
    matched_text: str = ""

    # "{category}: {term}" tags
    medical_terminology: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "directive_type": self.directive_type.value,
            "confidence": self.confidence,
            "conditions": list(self.conditions),
            "matched_text": self.matched_text,
            "medical_terminology": list(self.medical_terminology),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtractedDirective":
        """
        Raises:
            KeyError, ValueError, TypeError: missing type, unknown type,
                or a field of the wrong shape
        """
        matched_text = data.get("matched_text", "")
        if not isinstance(matched_text, str):
            raise TypeError("'matched_text' must be a string")

        return cls(
            directive_type=DirectiveType(data["directive_type"]),
            confidence=float(data.get("confidence", 0.0)),
            conditions=string_list(data, "conditions"),
            matched_text=matched_text,
            medical_terminology=string_list(data, "medical_terminology"),
        )


def string_list(data: Dict[str, Any], key: str) -> List[str]:
    """Optional list-of-strings field; anything else is a TypeError."""
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"'{key}' must be a list of strings")
    return list(value)
