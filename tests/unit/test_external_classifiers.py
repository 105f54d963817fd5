# ============================================================================
# FILE: tests/unit/test_external_classifiers.py
# ============================================================================
"""
Unit tests for external classifier backends and the factory
"""

import json

import pytest

from directive_engine.constants import DirectiveType
from directive_engine.external import (
    BackendType,
    DEFAULT_ENHANCED_ANALYSIS,
    SimulatedExternalClassifier,
    UnavailableExternalClassifier,
    create_classifier,
)
from directive_engine.utils.exceptions import (
    ConfigurationError,
    ExternalClassifierError,
    ExternalClassifierResponseError,
    ExternalClassifierUnavailableError,
)


class TestFactory:

    def test_default_backend_is_simulated(self):
        classifier = create_classifier()
        assert isinstance(classifier, SimulatedExternalClassifier)
        assert classifier.backend_type == BackendType.SIMULATED

    def test_unavailable_backend(self):
        classifier = create_classifier({'backend': 'unavailable'})
        assert isinstance(classifier, UnavailableExternalClassifier)

    def test_backend_name_case_insensitive(self):
        assert isinstance(create_classifier({'backend': 'SIMULATED'}), SimulatedExternalClassifier)

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError) as exc_info:
            create_classifier({'backend': 'openai'})
        assert exc_info.value.context["backend"] == "openai"
        assert "simulated" in exc_info.value.context["supported"]

    def test_backend_options_passed_through(self):
        classifier = create_classifier({'backend': 'simulated', 'simulated_latency_seconds': 0.5})
        assert classifier.latency_seconds == 0.5


class TestSimulatedClassifier:

    @pytest.mark.asyncio
    async def test_default_enhanced_analysis(self):
        classifier = SimulatedExternalClassifier()
        analysis = await classifier.classify("I do not want CPR.")

        assert analysis.confidence_score == pytest.approx(0.88)
        assert analysis.directive_types == ["DNR"]
        dnr = analysis.get_directive(DirectiveType.DNR)
        assert dnr.confidence == pytest.approx(0.92)
        assert dnr.conditions == ["Recovery probability < 5%"]
        assert dnr.medical_terminology == ["terminal condition", "palliative care"]
        assert analysis.contraindications == ["Requires medical review"]
        assert analysis.legal_validity_score == pytest.approx(0.85)
        assert analysis.cost_estimate_usd == pytest.approx(0.04)

    @pytest.mark.asyncio
    async def test_custom_payload(self):
        payload = dict(DEFAULT_ENHANCED_ANALYSIS, confidence_score=0.6)
        classifier = SimulatedExternalClassifier({'simulated_payload': json.dumps(payload)})

        analysis = await classifier.classify("text")
        assert analysis.confidence_score == pytest.approx(0.6)

    @pytest.mark.asyncio
    async def test_repairs_malformed_json(self):
        """Single quotes and trailing commas are repaired"""
        payload = (
            "{'confidence_score': 0.9, 'extracted_directives': "
            "[{'directive_type': 'LIVING_WILL', 'confidence': 0.83,}],}"
        )
        classifier = SimulatedExternalClassifier({'simulated_payload': payload})

        analysis = await classifier.classify("text")
        assert analysis.confidence_score == pytest.approx(0.9)
        assert analysis.directive_types == ["LIVING_WILL"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        "",
        "   ",
        '{"extracted_directives": []}',
        '{"confidence_score": 0.9, "extracted_directives": [{"directive_type": "PROXY"}]}',
        '{"confidence_score": 1.4}',
        '{"confidence_score": 0.9, "legal_validity_score": -0.1}',
        '{"confidence_score": 0.9, "contraindications": "Requires medical review"}',
        '{"confidence_score": 0.9, "requires_human_review": "false"}',
        '{"confidence_score": 0.9, "requires_human_review": 0}',
        '{"confidence_score": 0.9, "extracted_directives": {"directive_type": "DNR"}}',
        '{"confidence_score": 0.9, "extracted_directives": '
        '[{"directive_type": "DNR", "conditions": "Terminal condition"}]}',
        '{"confidence_score": 0.9, "extracted_directives": '
        '[{"directive_type": "DNR", "medical_terminology": [1, 2]}]}',
    ])
    async def test_unusable_payload(self, payload):
        classifier = SimulatedExternalClassifier({'simulated_payload': payload})

        with pytest.raises(ExternalClassifierResponseError) as exc_info:
            await classifier.classify("text")

        assert exc_info.value.kind == "ExternalClassifierUnavailable"
        assert classifier.get_statistics()["failures"] == 1

    @pytest.mark.asyncio
    async def test_call_statistics(self):
        classifier = SimulatedExternalClassifier()
        await classifier.classify("a")
        await classifier.classify("b")

        assert classifier.get_statistics() == {
            "backend": "simulated",
            "calls": 2,
            "failures": 0,
        }

    @pytest.mark.asyncio
    async def test_health_check(self):
        health = await SimulatedExternalClassifier().health_check()
        assert health["healthy"] is True
        assert health["backend"] == "simulated"


class TestUnavailableClassifier:

    @pytest.mark.asyncio
    async def test_always_fails(self):
        classifier = UnavailableExternalClassifier()

        with pytest.raises(ExternalClassifierUnavailableError) as exc_info:
            await classifier.classify("I do not want CPR.")

        assert isinstance(exc_info.value, ExternalClassifierError)
        assert exc_info.value.to_dict()["context"] == {"backend": "unavailable"}
        assert classifier.get_statistics()["failures"] == 1

    @pytest.mark.asyncio
    async def test_health_check(self):
        health = await UnavailableExternalClassifier().health_check()
        assert health["healthy"] is False
