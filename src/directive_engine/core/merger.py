# ============================================================================
# src/directive_engine/core/merger.py
# ============================================================================
"""
Result Merger

Combines the local analysis with the external classifier's analysis after
an escalation:

- Directives: concatenate, keep the highest-confidence entry per type
  (ties keep the local entry), order by descending confidence
- Confidence: plain two-term mean of the local and external aggregates
- Contraindications, legal validity: taken from the external analysis
- Review flag: recomputed from the merged confidence; input-level review
  markers (long text, complex terminology) still force review
"""

from dataclasses import replace
from typing import Dict, List, Optional
import logging

from .context.analysis import DirectiveAnalysis
from .context.enums import ProcessingTier
from .context.extracted_directive import ExtractedDirective
from ..config.thresholds_config import threshold_settings
from ..constants import DirectiveType

logger = logging.getLogger(__name__)


def deduplicate_directives(directives: List[ExtractedDirective]) -> List[ExtractedDirective]:
    """Keep one directive per type, the first seen winning ties. Returns copies."""
    best: Dict[DirectiveType, ExtractedDirective] = {}
    for directive in directives:
        current = best.get(directive.directive_type)
        if current is None or directive.confidence > current.confidence:
            best[directive.directive_type] = directive

    # sorted() is stable, so equal confidences keep first-seen order
    ranked = sorted(best.values(), key=lambda d: d.confidence, reverse=True)
    return [
        replace(
            d,
            conditions=list(d.conditions),
            medical_terminology=list(d.medical_terminology),
        )
        for d in ranked
    ]


class ResultMerger:

    def __init__(self, review_threshold: Optional[float] = None):
        self.review_threshold = (
            threshold_settings.REVIEW_THRESHOLD if review_threshold is None else review_threshold
        )

    def merge(
        self,
        local: DirectiveAnalysis,
        external: DirectiveAnalysis,
        review_markers: bool = False
    ) -> DirectiveAnalysis:
        """
        Merge local and external analyses.

        Args:
            local: LocalClassifier output
            external: External classifier output
            review_markers: True when the input itself requires review
                (length cap exceeded or complex terminology present)

        Returns:
            Merged analysis tagged HYBRID
        """
        combined_confidence = (local.confidence_score + external.confidence_score) / 2.0
        directives = deduplicate_directives(
            list(local.extracted_directives) + list(external.extracted_directives)
        )

        logger.debug(
            f"Merged {len(local.extracted_directives)} local + "
            f"{len(external.extracted_directives)} external directive(s) into "
            f"{len(directives)}; confidence {combined_confidence:.2f}"
        )

        return DirectiveAnalysis(
            confidence_score=combined_confidence,
            extracted_directives=directives,
            contraindications=list(external.contraindications),
            legal_validity_score=external.legal_validity_score,
            requires_human_review=review_markers or combined_confidence < self.review_threshold,
            processing_tier=ProcessingTier.HYBRID,
        )
