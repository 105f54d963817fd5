# ============================================================================
# src/directive_engine/extractors/signal_extractor.py
# ============================================================================
"""
Signal Extractor

Scans normalized directive text against the lexicon:

1. KEYWORD HITS
   - Count trigger phrases found as plain substrings (mid-word matches count)
   - Ratio = matched / total phrases for the type

2. BOOSTS
   - +0.10 explicit refusal ("i do not want", "i refuse")
   - +0.05 witnessing/signing ("witnessed", "signed")
   - +0.05 competency ("sound mind")
   - Total capped at 1.0

3. ACCEPTANCE
   - A type with at least one hit is accepted when the boosted
     confidence reaches its threshold

4. ANNOTATION (accepted types only)
   - Conditions from the type's fixed rules
   - Terminology tags "{category}: {term}" from the taxonomy
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple
import logging

from ..constants import DirectiveType, CONFIDENCE_BOOSTS
from ..core.context.extracted_directive import ExtractedDirective
from ..core.lexicon import LexiconStore

logger = logging.getLogger(__name__)


def contains_any(text: str, needles: Iterable[str]) -> bool:
    return any(needle in text for needle in needles)


def rule_fires(text: str, groups: Sequence[Tuple[str, ...]]) -> bool:
    """True when every group has at least one substring present in text."""
    return all(contains_any(text, group) for group in groups)


def confidence_boost(text: str) -> float:
    """Sum of the stylistic-marker boosts present in text."""
    return sum(boost for markers, boost in CONFIDENCE_BOOSTS if contains_any(text, markers))


def keyword_confidence(matches: int, total: int, text: str) -> float:
    """Keyword ratio plus boosts, capped at 1.0."""
    if total <= 0:
        return 0.0
    return min(matches / total + confidence_boost(text), 1.0)


@dataclass
class DirectiveSignal:
    """Keyword evidence for one directive type."""
    directive_type: DirectiveType
    matched_phrases: List[str]
    total_phrases: int
    confidence: float
    threshold: float

    @property
    def keyword_ratio(self) -> float:
        return len(self.matched_phrases) / self.total_phrases if self.total_phrases else 0.0

    @property
    def accepted(self) -> bool:
        return bool(self.matched_phrases) and self.confidence >= self.threshold


@dataclass
class SignalExtractionResult:
    signals: List[DirectiveSignal] = field(default_factory=list)
    accepted_directives: List[ExtractedDirective] = field(default_factory=list)
    medical_terminology: List[str] = field(default_factory=list)

    def signal_for(self, directive_type: DirectiveType) -> DirectiveSignal:
        for signal in self.signals:
            if signal.directive_type == directive_type:
                return signal
        raise KeyError(directive_type)


class SignalExtractor:
    """
    Produces per-type keyword signals and accepted directives.

    Stateless apart from the shared, read-only lexicon.
    """

    def __init__(self, lexicon: LexiconStore):
        self.lexicon = lexicon

    def extract(self, text: str) -> SignalExtractionResult:
        """
        Extract signals from normalized text.

        Args:
            text: Output of normalize_text()

        Returns:
            SignalExtractionResult with one signal per directive type and the
            accepted directives in lexicon order
        """
        result = SignalExtractionResult()
        terminology = None

        for directive_type, phrases in self.lexicon.trigger_phrases.items():
            signal = self.score(directive_type, text)
            result.signals.append(signal)

            if not signal.accepted:
                continue

            # Terminology is independent of type; compute once per request
            if terminology is None:
                terminology = self.extract_medical_terminology(text)

            result.accepted_directives.append(ExtractedDirective(
                directive_type=directive_type,
                confidence=signal.confidence,
                conditions=self.extract_conditions(text, directive_type),
                matched_text=", ".join(signal.matched_phrases),
                medical_terminology=list(terminology),
            ))

            logger.debug(
                f"Accepted {directive_type.value}: {len(signal.matched_phrases)}/"
                f"{signal.total_phrases} phrases, confidence {signal.confidence:.2f} "
                f">= {signal.threshold:.2f}"
            )

        result.medical_terminology = terminology or []
        return result

    def score(self, directive_type: DirectiveType, text: str) -> DirectiveSignal:
        phrases = self.lexicon.trigger_phrases[directive_type]
        matched = [phrase for phrase in phrases if phrase in text]
        confidence = keyword_confidence(len(matched), len(phrases), text) if matched else 0.0

        return DirectiveSignal(
            directive_type=directive_type,
            matched_phrases=matched,
            total_phrases=len(phrases),
            confidence=confidence,
            threshold=self.lexicon.threshold_for(directive_type),
        )

    def extract_conditions(self, text: str, directive_type: DirectiveType) -> List[str]:
        return [
            label
            for groups, label in self.lexicon.condition_rules.get(directive_type, ())
            if rule_fires(text, groups)
        ]

    def extract_medical_terminology(self, text: str) -> List[str]:
        return [
            f"{category}: {term}"
            for category, terms in self.lexicon.terminology.items()
            for term in terms
            if term in text
        ]

    def contains_complex_terms(self, text: str) -> bool:
        return contains_any(text, self.lexicon.complex_terms)
