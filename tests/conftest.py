# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import asyncio
from typing import Any, Dict, List, Optional

import pytest

from directive_engine.constants import DirectiveType
from directive_engine.core.audit import AuditSink
from directive_engine.core.context import DirectiveAnalysis, ExtractedDirective
from directive_engine.core.engine import DirectiveEngine
from directive_engine.core.lexicon import LexiconStore
from directive_engine.external.base import BaseExternalClassifier, BackendType


class StubExternalClassifier(BaseExternalClassifier):
    """Deterministic external classifier for tests."""

    def __init__(
        self,
        analysis: Optional[DirectiveAnalysis] = None,
        error: Optional[Exception] = None,
        delay_seconds: float = 0.0
    ):
        super().__init__({})
        self.analysis = analysis
        self.error = error
        self.delay_seconds = delay_seconds
        self.received: List[str] = []

    @property
    def backend_type(self) -> BackendType:
        return BackendType.SIMULATED

    async def classify(self, text: str) -> DirectiveAnalysis:
        self.received.append(text)
        self._call_count += 1
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        return self.analysis

    async def health_check(self) -> Dict[str, Any]:
        return {"healthy": True, "backend": "stub", "details": "test stub"}


class RecordingAuditSink(AuditSink):

    def __init__(self):
        self.records = []

    def record(self, patient_id: str, analysis: DirectiveAnalysis) -> None:
        self.records.append((patient_id, analysis))


@pytest.fixture
def dnr_high_confidence_text():
    """DNR statement hitting 8 of 10 triggers plus all three boosts"""
    return """
    I do not want to be resuscitated. Do not resuscitate (DNR).
    No CPR, no life support, no mechanical ventilation.
    Comfort care only and palliative care at the end of life.
    Signed while of sound mind.
    """


@pytest.fixture
def refusal_statement_text():
    """Short refusal statement: few triggers, all boosts"""
    return "I do not want CPR. No mechanical ventilation. Comfort care only. Signed, sound mind."


@pytest.fixture
def data_consent_text():
    """Data consent hitting 7 of 8 triggers (0.875, below the escalation cutoff)"""
    return (
        "I agree to share data as anonymized data for medical research, "
        "cancer research, genetic studies and clinical trials."
    )


@pytest.fixture
def organ_donation_text():
    """Organ donation statement hitting all 10 triggers"""
    return (
        "I wish to donate organs: kidney, liver, heart and cornea. "
        "Tissue donation and organ donation for transplant. "
        "Donate my remains; organ harvesting is acceptable."
    )


@pytest.fixture
def coercion_text():
    return "I was coerced and forced to sign this directive under pressure from my family."


@pytest.fixture
def lexicon():
    return LexiconStore.default()


@pytest.fixture
def external_analysis():
    """Analysis returned by the stub external classifier"""
    return DirectiveAnalysis(
        confidence_score=0.7,
        extracted_directives=[
            ExtractedDirective(
                directive_type=DirectiveType.DATA_CONSENT,
                confidence=0.95,
                conditions=["Anonymization required"],
                matched_text="external extraction",
            ),
            ExtractedDirective(
                directive_type=DirectiveType.DNR,
                confidence=0.8,
                matched_text="external extraction",
            ),
        ],
        contraindications=["Requires medical review"],
        legal_validity_score=0.85,
        requires_human_review=True,
        cost_estimate_usd=0.04,
    )


@pytest.fixture
def stub_external(external_analysis):
    return StubExternalClassifier(analysis=external_analysis)


@pytest.fixture
def make_stub(external_analysis):
    """Factory for stubs that fail or answer slowly"""
    def _make(error: Optional[Exception] = None, delay_seconds: float = 0.0):
        return StubExternalClassifier(
            analysis=external_analysis,
            error=error,
            delay_seconds=delay_seconds,
        )
    return _make


@pytest.fixture
def audit_sink():
    return RecordingAuditSink()


@pytest.fixture
def engine(stub_external, audit_sink):
    """Engine wired to the deterministic stub and a recording audit sink"""
    return DirectiveEngine(external_classifier=stub_external, audit_sink=audit_sink)


@pytest.fixture
def make_engine(audit_sink):
    """Factory for engines with custom external classifier and config"""
    def _make(external: BaseExternalClassifier, config: Optional[Dict[str, Any]] = None):
        return DirectiveEngine(
            config=config,
            external_classifier=external,
            audit_sink=audit_sink,
        )
    return _make
