# ============================================================================
# FILE: tests/unit/test_signal_extractor.py
# ============================================================================
"""
Unit tests for keyword signal extraction
"""

import pytest

from directive_engine.constants import DirectiveType
from directive_engine.core.lexicon import LexiconStore
from directive_engine.extractors.signal_extractor import (
    SignalExtractor,
    confidence_boost,
    keyword_confidence,
    rule_fires,
)
from directive_engine.utils.text_normalizer import normalize_text


@pytest.fixture
def extractor(lexicon):
    return SignalExtractor(lexicon)


class TestConfidenceFormula:
    """Ratio + boosts, capped at 1.0"""

    def test_no_boost_markers(self):
        assert confidence_boost("no cpr please") == 0.0
        assert keyword_confidence(3, 10, "no cpr please") == pytest.approx(0.3)

    def test_each_boost(self):
        assert confidence_boost("i refuse cpr") == pytest.approx(0.10)
        assert confidence_boost("witnessed by my sister") == pytest.approx(0.05)
        assert confidence_boost("of sound mind") == pytest.approx(0.05)

    def test_boost_counted_once_per_marker_group(self):
        # "i do not want" and "i refuse" belong to the same marker group
        assert confidence_boost("i do not want cpr, i refuse intubation") == pytest.approx(0.10)

    def test_all_boosts(self):
        text = "i refuse cpr. signed and witnessed, of sound mind."
        assert confidence_boost(text) == pytest.approx(0.20)

    def test_cap_at_one(self):
        text = "i refuse. signed. sound mind."
        assert keyword_confidence(10, 10, text) == 1.0

    def test_zero_total(self):
        assert keyword_confidence(0, 0, "anything") == 0.0


def test_rule_fires_requires_every_group():
    groups = (("less than",), ("percent", "%"))
    assert rule_fires("less than 5 percent chance", groups)
    assert rule_fires("less than 5% chance", groups)
    assert not rule_fires("less than five chances", groups)


class TestScoring:

    def test_refusal_statement_score(self, extractor, refusal_statement_text):
        """Two of ten DNR phrases plus all boosts stays under the DNR threshold"""
        text = normalize_text(refusal_statement_text)
        signal = extractor.score(DirectiveType.DNR, text)

        assert signal.matched_phrases == ["no mechanical ventilation", "comfort care only"]
        assert signal.keyword_ratio == pytest.approx(0.2)
        assert signal.confidence == pytest.approx(0.4)
        assert signal.threshold == 0.85
        assert not signal.accepted

    def test_no_matches_scores_zero_even_with_boosts(self, extractor):
        signal = extractor.score(DirectiveType.LIVING_WILL, "i refuse. signed, sound mind.")
        assert signal.matched_phrases == []
        assert signal.confidence == 0.0
        assert not signal.accepted

    def test_substring_matching_inside_words(self, extractor):
        # "heart" inside "heartfelt" still counts
        signal = extractor.score(DirectiveType.ORGAN_DONATION, "my heartfelt thanks")
        assert signal.matched_phrases == ["heart"]

    def test_adding_trigger_phrase_never_lowers_confidence(self, extractor):
        base = "donate organs. kidney."
        richer = base + " liver."

        before = extractor.score(DirectiveType.ORGAN_DONATION, base).confidence
        after = extractor.score(DirectiveType.ORGAN_DONATION, richer).confidence
        assert after > before

    def test_refusal_phrase_raises_dnr_confidence(self, extractor):
        base = "no cpr. dnr. no life support."
        before = extractor.score(DirectiveType.DNR, base).confidence
        after = extractor.score(DirectiveType.DNR, "i refuse all of it. " + base).confidence
        assert after == pytest.approx(before + 0.10)

    def test_adding_boost_marker_never_lowers_confidence(self, extractor):
        base = "donate organs. kidney."
        before = extractor.score(DirectiveType.ORGAN_DONATION, base).confidence
        after = extractor.score(DirectiveType.ORGAN_DONATION, base + " signed.").confidence
        assert after == pytest.approx(before + 0.05)


class TestExtraction:

    def test_high_confidence_dnr(self, extractor, dnr_high_confidence_text):
        result = extractor.extract(normalize_text(dnr_high_confidence_text))

        assert len(result.accepted_directives) == 1
        dnr = result.accepted_directives[0]
        assert dnr.directive_type == DirectiveType.DNR
        assert dnr.confidence == pytest.approx(1.0)
        assert dnr.conditions == ["Comfort care preference"]
        assert "do not resuscitate" in dnr.matched_text
        assert result.signal_for(DirectiveType.DNR).keyword_ratio == pytest.approx(0.8)

    def test_one_signal_per_type(self, extractor):
        result = extractor.extract("")
        assert [s.directive_type for s in result.signals] == list(DirectiveType)
        assert result.accepted_directives == []
        assert result.medical_terminology == []

    def test_data_consent_conditions_and_terminology(self, extractor, data_consent_text):
        result = extractor.extract(normalize_text(data_consent_text))

        assert [d.directive_type for d in result.accepted_directives] == [
            DirectiveType.DATA_CONSENT
        ]
        consent = result.accepted_directives[0]
        assert consent.confidence == pytest.approx(0.875)
        assert consent.conditions == [
            "Anonymization required",
            "Cancer research consent",
            "Genetic research consent",
            "Clinical trial participation",
        ]
        assert consent.medical_terminology == ["oncological: cancer"]

    def test_organ_donation_conditions(self, extractor, organ_donation_text):
        result = extractor.extract(normalize_text(organ_donation_text))

        organ = result.accepted_directives[0]
        assert organ.directive_type == DirectiveType.ORGAN_DONATION
        assert organ.confidence == pytest.approx(1.0)
        assert organ.conditions == [
            "Kidney donation",
            "Liver donation",
            "Heart donation",
            "Cornea donation",
            "Tissue donation",
        ]

    def test_recovery_probability_condition(self, extractor):
        text = normalize_text(
            "I do not want CPR if recovery is less than 5% - no resuscitation, "
            "do not resuscitate, DNR, do not revive, no life support, "
            "no mechanical ventilation, palliative care at the end of life, "
            "terminal illness. Signed."
        )
        dnr = extractor.extract(text).accepted_directives[0]

        assert "Recovery probability threshold specified" in dnr.conditions
        assert "Terminal condition specified" in dnr.conditions

    def test_terminology_format(self, extractor):
        tags = extractor.extract_medical_terminology(
            "history of stroke and copd after cardiac arrest"
        )
        assert tags == [
            "cardiovascular: cardiac arrest",
            "respiratory: copd",
            "neurological: stroke",
        ]

    def test_custom_threshold_accepts_low_ratio(self):
        """Lowering the organ donation threshold accepts a three-phrase statement"""
        extractor = SignalExtractor(
            LexiconStore.default(thresholds={DirectiveType.ORGAN_DONATION: 0.3})
        )
        text = normalize_text("Please donate organs: my kidney and liver.")
        result = extractor.extract(text)

        organ = result.accepted_directives[0]
        assert organ.confidence == pytest.approx(0.3)
        assert organ.conditions == ["Kidney donation", "Liver donation"]

    def test_complex_terms(self, extractor):
        assert extractor.contains_complex_terms("admitted with sepsis")
        assert not extractor.contains_complex_terms("admitted with a cold")
