# ============================================================================
# src/directive_engine/core/context/analysis.py
# ============================================================================
"""
Directive analysis result
- Aggregate confidence and review flag
- Extracted directives (unique by type once merged)
- Contraindications and legal validity estimate
- Tier, cost and latency of the request that produced it
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import ProcessingTier
from .extracted_directive import ExtractedDirective, string_list


@dataclass
class EscalationFailure:
    """Structured record of a failed escalation (kind + context)."""
    kind: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "context": dict(self.context),
        }


@dataclass
class DirectiveAnalysis:
    confidence_score: float = 0.0
    extracted_directives: List[ExtractedDirective] = field(default_factory=list)
    contraindications: List[str] = field(default_factory=list)
    legal_validity_score: float = 0.0
    requires_human_review: bool = True

    processing_tier: ProcessingTier = ProcessingTier.LOCAL
    cost_estimate_usd: float = 0.0
    latency_ms: float = 0.0

    # Set only when escalation was attempted and failed
    escalation_error: Optional[EscalationFailure] = None

    @property
    def directive_types(self) -> List[str]:
        return [d.directive_type.value for d in self.extracted_directives]

    def get_directive(self, directive_type) -> Optional[ExtractedDirective]:
        """Return the extracted directive of the given type, if any."""
        for directive in self.extracted_directives:
            if directive.directive_type == directive_type:
                return directive
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "confidence_score": self.confidence_score,
            "extracted_directives": [d.to_dict() for d in self.extracted_directives],
            "contraindications": list(self.contraindications),
            "legal_validity_score": self.legal_validity_score,
            "requires_human_review": self.requires_human_review,
            "processing_tier": self.processing_tier.value,
            "cost_estimate_usd": self.cost_estimate_usd,
            "latency_ms": self.latency_ms,
            "escalation_error": (
                self.escalation_error.to_dict() if self.escalation_error else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DirectiveAnalysis":
        """
        Build an analysis from a plain dict (e.g. an external classifier payload).

        Missing optional fields take their defaults; the tier of a payload is
        ignored because the router decides the reported tier. Present fields
        must have the right shape.

        Raises:
            KeyError, ValueError, TypeError: missing confidence or a malformed field
        """
        directives = data.get("extracted_directives", [])
        if not isinstance(directives, list) or not all(isinstance(d, dict) for d in directives):
            raise TypeError("'extracted_directives' must be a list of objects")

        requires_review = data.get("requires_human_review", True)
        if not isinstance(requires_review, bool):
            raise TypeError("'requires_human_review' must be a boolean")

        return cls(
            confidence_score=float(data["confidence_score"]),
            extracted_directives=[ExtractedDirective.from_dict(d) for d in directives],
            contraindications=string_list(data, "contraindications"),
            legal_validity_score=float(data.get("legal_validity_score", 0.0)),
            requires_human_review=requires_review,
            cost_estimate_usd=float(data.get("cost_estimate_usd", 0.0)),
        )
