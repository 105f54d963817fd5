# ============================================================================
# src/directive_engine/core/lexicon.py
# ============================================================================
"""
Lexicon Store

Read-only configuration shared by every classification:
- Trigger phrases per directive type
- One acceptance threshold per directive type
- Condition rules per directive type
- Terminology taxonomy and complex-term markers

A LexiconStore is built once and never mutated, so concurrent requests can
share a single instance without locking.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..config.thresholds_config import threshold_settings
from ..constants import (
    DirectiveType,
    TRIGGER_PHRASES,
    CONDITION_RULES,
    MEDICAL_TERMINOLOGY,
    COMPLEX_MEDICAL_TERMS,
)
from ..utils.exceptions import ConfigurationError

# ((group, group, ...), label) where each group is a tuple of alternatives
ConditionRule = Tuple[Tuple[Tuple[str, ...], ...], str]


@dataclass(frozen=True)
class LexiconStore:
    trigger_phrases: Mapping[DirectiveType, Tuple[str, ...]]
    thresholds: Mapping[DirectiveType, float]
    condition_rules: Mapping[DirectiveType, Tuple[ConditionRule, ...]]
    terminology: Mapping[str, Tuple[str, ...]]
    complex_terms: Tuple[str, ...]

    @classmethod
    def build(
        cls,
        trigger_phrases: Mapping[DirectiveType, Sequence[str]],
        thresholds: Mapping[DirectiveType, float],
        condition_rules: Optional[Mapping[DirectiveType, Sequence[ConditionRule]]] = None,
        terminology: Optional[Mapping[str, Sequence[str]]] = None,
        complex_terms: Optional[Sequence[str]] = None,
    ) -> "LexiconStore":
        """
        Validate and freeze a lexicon.

        Raises:
            ConfigurationError: a directive type has no trigger phrases, no
                threshold, or a threshold outside [0, 1]
        """
        frozen_triggers: Dict[DirectiveType, Tuple[str, ...]] = {}
        frozen_thresholds: Dict[DirectiveType, float] = {}

        for directive_type in DirectiveType:
            phrases = trigger_phrases.get(directive_type)
            if not phrases:
                raise ConfigurationError(
                    f"No trigger phrases configured for {directive_type.value}",
                    {"directive_type": directive_type.value},
                )
            if directive_type not in thresholds:
                raise ConfigurationError(
                    f"No threshold configured for {directive_type.value}",
                    {"directive_type": directive_type.value},
                )
            threshold = float(thresholds[directive_type])
            if not 0.0 <= threshold <= 1.0:
                raise ConfigurationError(
                    f"Threshold for {directive_type.value} must be within [0, 1]",
                    {"directive_type": directive_type.value, "threshold": threshold},
                )

            frozen_triggers[directive_type] = tuple(p.lower() for p in phrases)
            frozen_thresholds[directive_type] = threshold

        rules = condition_rules if condition_rules is not None else CONDITION_RULES
        terms = terminology if terminology is not None else MEDICAL_TERMINOLOGY
        complex_list = complex_terms if complex_terms is not None else COMPLEX_MEDICAL_TERMS

        return cls(
            trigger_phrases=MappingProxyType(frozen_triggers),
            thresholds=MappingProxyType(frozen_thresholds),
            condition_rules=MappingProxyType({
                directive_type: tuple(rules.get(directive_type, ()))
                for directive_type in DirectiveType
            }),
            terminology=MappingProxyType({
                category: tuple(t.lower() for t in term_list)
                for category, term_list in terms.items()
            }),
            complex_terms=tuple(t.lower() for t in complex_list),
        )

    @classmethod
    def default(
        cls,
        thresholds: Optional[Mapping[DirectiveType, float]] = None
    ) -> "LexiconStore":
        """Default lexicon; thresholds come from threshold settings unless given."""
        merged = threshold_settings.directive_thresholds()
        if thresholds:
            merged.update(thresholds)
        return cls.build(TRIGGER_PHRASES, merged)

    def threshold_for(self, directive_type: DirectiveType) -> float:
        return self.thresholds[directive_type]

    def supported_directive_types(self) -> List[str]:
        return [directive_type.value for directive_type in self.trigger_phrases]

    def terminology_categories(self) -> List[str]:
        return list(self.terminology.keys())
