# ============================================================================
# src/directive_engine/classifiers/local_classifier.py
# ============================================================================
"""
Local Directive Classifier

Turns keyword signals into a candidate DirectiveAnalysis without any
external call:

1. SIGNALS
   - SignalExtractor decides which directive types are accepted

2. AGGREGATE CONFIDENCE
   - Mean of accepted directive confidences
   - No accepted directive → 0.0 (valid result, not an error)

3. CONTRAINDICATIONS (independent of directive type)
   - Religious objection, family disagreement, hedging, coercion

4. LEGAL VALIDITY
   - Base 0.5, fixed deltas for competency/witness/signature/date/notary
     and for coercion/confusion/intoxication, clamped to [0, 1]

5. REVIEW FLAG
   - Confidence below review threshold, long input, or complex terminology

The result is tentatively tagged LOCAL; the escalation router decides
whether it stands.
"""

from typing import Any, Dict, List, Optional
import logging

from ..config.thresholds_config import threshold_settings
from ..config.routing_config import routing_settings
from ..constants import (
    CONTRAINDICATION_RULES,
    LEGAL_VALIDITY_BASE,
    LEGAL_VALIDITY_DELTAS,
)
from ..core.context.analysis import DirectiveAnalysis
from ..core.context.enums import ProcessingTier
from ..core.lexicon import LexiconStore
from ..extractors.signal_extractor import SignalExtractor, contains_any, rule_fires


def detect_contraindications(text: str) -> List[str]:
    return [label for groups, label in CONTRAINDICATION_RULES if rule_fires(text, groups)]


def assess_legal_validity(text: str) -> float:
    score = LEGAL_VALIDITY_BASE
    for markers, delta in LEGAL_VALIDITY_DELTAS:
        if contains_any(text, markers):
            score += delta
    return max(0.0, min(score, 1.0))


class LocalClassifier:
    """
    Keyword-based directive classifier (first tier).

    Config options:
        review_threshold: aggregate confidence below this needs review (default: 0.85)
        review_length_cap: normalized text longer than this needs review (default: 1000)
    """

    def __init__(
        self,
        lexicon: Optional[LexiconStore] = None,
        config: Optional[Dict[str, Any]] = None
    ):
        self.config = config or {}
        self.lexicon = lexicon or LexiconStore.default()
        self.extractor = SignalExtractor(self.lexicon)
        self.logger = logging.getLogger(__name__)

        self.review_threshold = self.config.get(
            'review_threshold', threshold_settings.REVIEW_THRESHOLD
        )
        self.review_length_cap = self.config.get(
            'review_length_cap', routing_settings.REVIEW_LENGTH_CAP
        )

    def classify(self, text: str) -> DirectiveAnalysis:
        """
        Classify normalized directive text.

        Args:
            text: Output of normalize_text()

        Returns:
            DirectiveAnalysis tagged LOCAL (cost and latency left for the caller)
        """
        signals = self.extractor.extract(text)
        directives = signals.accepted_directives

        if directives:
            confidence = sum(d.confidence for d in directives) / len(directives)
        else:
            confidence = 0.0

        analysis = DirectiveAnalysis(
            confidence_score=confidence,
            extracted_directives=directives,
            contraindications=detect_contraindications(text),
            legal_validity_score=assess_legal_validity(text),
            requires_human_review=self.requires_review(confidence, text),
            processing_tier=ProcessingTier.LOCAL,
        )

        self.logger.debug(
            f"Local classification: {len(directives)} directive(s), "
            f"confidence {confidence:.2f}, review={analysis.requires_human_review}"
        )
        return analysis

    def requires_review(self, confidence: float, text: str) -> bool:
        return self.review_markers_present(text) or confidence < self.review_threshold

    def review_markers_present(self, text: str) -> bool:
        """Review triggers that do not depend on confidence."""
        return (
            len(text) > self.review_length_cap
            or self.extractor.contains_complex_terms(text)
        )
