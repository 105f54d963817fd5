# ============================================================================
# src/directive_engine/core/engine.py
# ============================================================================
"""
Directive Engine

This is the MAIN entry point for directive classification.

Flow:
1. Validate input (type, encoding, size cap) - reject before any processing
2. Normalize text
3. Local classification (keyword signals)
4. Escalation routing (accept LOCAL or escalate → merge as HYBRID)
5. Cost estimate and latency
6. Statistics update
7. Audit record

The engine owns one instance of every component. The lexicon is shared
read-only; statistics are only written through the StatsTracker.
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional, Union
import logging
import time

from .audit import AuditSink, LoggingAuditSink
from .context.analysis import DirectiveAnalysis
from .context.enums import ProcessingTier
from .lexicon import LexiconStore
from .merger import ResultMerger
from .router import EscalationRouter
from .stats import ProcessingStats, StatsTracker, estimate_processing_cost
from ..assessors.risk_assessor import RiskAssessment, RiskAssessor
from ..classifiers.local_classifier import LocalClassifier
from ..config.logging_config import logging_settings
from ..config.routing_config import routing_settings
from ..external.base import BaseExternalClassifier
from ..external.client import create_classifier
from ..utils.exceptions import InvalidInputError
from ..utils.logging import LogAdapter
from ..utils.text_normalizer import normalize_text, validate_directive_text


class DirectiveEngine:
    """
    Hybrid directive classification engine.

    Config options (all optional, settings provide defaults):
        max_input_chars: reject longer directive text
        review_threshold, review_length_cap: see LocalClassifier
        escalation_cutoff, timeout_seconds, escalate_on_no_match: see EscalationRouter
        local_cost_usd, hybrid_base_cost_usd, hybrid_cost_baseline_chars: cost model
        external: config dict for create_classifier() when no classifier is injected

    Example:
        engine = DirectiveEngine()
        analysis = await engine.process_directive("patient-1", "I do not want CPR...")
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        lexicon: Optional[LexiconStore] = None,
        external_classifier: Optional[BaseExternalClassifier] = None,
        stats_tracker: Optional[StatsTracker] = None,
        audit_sink: Optional[AuditSink] = None
    ):
        self.config = config or {}
        self.logger = logging.getLogger(__name__)

        self.lexicon = lexicon or LexiconStore.default()
        self.local_classifier = LocalClassifier(self.lexicon, self.config)
        self.external_classifier = external_classifier or create_classifier(
            self.config.get('external')
        )
        self.router = EscalationRouter(
            self.external_classifier,
            merger=ResultMerger(self.local_classifier.review_threshold),
            config=self.config,
        )
        self.stats_tracker = stats_tracker or StatsTracker(
            self.config.get('full_external_cost_usd')
        )

        if audit_sink is None and logging_settings.ENABLE_AUDIT_TRAIL:
            audit_sink = LoggingAuditSink(logging_settings.AUDIT_LOG_PATH)
        self.audit_sink = audit_sink

        self.risk_assessor = RiskAssessor()
        self.max_input_chars = self.config.get(
            'max_input_chars', routing_settings.MAX_INPUT_CHARS
        )

        self.logger.info(
            f"Directive engine initialized "
            f"(external backend: {self.external_classifier.backend_type.value})"
        )

    # ========================================================================
    # CLASSIFICATION
    # ========================================================================

    async def process_directive(
        self,
        patient_id: str,
        directive_text: Union[str, bytes]
    ) -> DirectiveAnalysis:
        """
        Classify a patient's directive text end to end.

        Args:
            patient_id: Opaque patient identifier (only logged and audited)
            directive_text: Free-text directive statement

        Returns:
            Final DirectiveAnalysis with tier, cost and latency filled in

        Raises:
            InvalidInputError: bad identifier, bad encoding, or text over the size cap
        """
        start = time.perf_counter()

        if not isinstance(patient_id, str):
            raise InvalidInputError(
                "Patient identifier must be a string",
                {"reason": "type", "received_type": type(patient_id).__name__},
            )

        log = LogAdapter(self.logger, {"patient_id": patient_id})

        raw_text = validate_directive_text(directive_text, self.max_input_chars)
        normalized = normalize_text(raw_text)
        log.info(f"Processing directive ({len(raw_text)} chars)")

        local = self.local_classifier.classify(normalized)
        review_markers = self.local_classifier.review_markers_present(normalized)

        analysis = await self.router.route(raw_text, local, review_markers=review_markers)

        latency_ms = (time.perf_counter() - start) * 1000.0
        cost = estimate_processing_cost(analysis.processing_tier, len(raw_text), self.config)
        analysis = replace(analysis, cost_estimate_usd=cost, latency_ms=latency_ms)

        self.stats_tracker.record(
            tier=analysis.processing_tier,
            confidence=analysis.confidence_score,
            latency_ms=latency_ms,
            cost=cost,
            escalation_failed=analysis.escalation_error is not None,
        )

        if self.audit_sink is not None:
            self.audit_sink.record(patient_id, analysis)

        log.info(
            f"Directive processed: confidence {analysis.confidence_score:.2f}, "
            f"tier {analysis.processing_tier.value}, cost ${cost:.4f}, "
            f"{latency_ms:.1f}ms, review={analysis.requires_human_review}"
        )
        return analysis

    def classify_locally(self, directive_text: Union[str, bytes]) -> DirectiveAnalysis:
        """
        Local-tier classification only.

        No escalation, no statistics or audit side effects.
        """
        start = time.perf_counter()
        raw_text = validate_directive_text(directive_text, self.max_input_chars)
        analysis = self.local_classifier.classify(normalize_text(raw_text))

        return replace(
            analysis,
            cost_estimate_usd=estimate_processing_cost(
                ProcessingTier.LOCAL, len(raw_text), self.config
            ),
            latency_ms=(time.perf_counter() - start) * 1000.0,
        )

    # ========================================================================
    # RISK ASSESSMENT
    # ========================================================================

    def assess_patient_risk(
        self,
        patient_id: str,
        medical_history: str,
        current_condition: str
    ) -> RiskAssessment:
        """Heuristic recovery-probability assessment for a patient."""
        history = validate_directive_text(medical_history, self.max_input_chars)
        condition = validate_directive_text(current_condition, self.max_input_chars)

        LogAdapter(self.logger, {"patient_id": patient_id}).info("Assessing patient risk")
        return self.risk_assessor.assess(history, condition)

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_processing_statistics(self) -> ProcessingStats:
        return self.stats_tracker.snapshot()

    def get_supported_directive_types(self) -> List[str]:
        return self.lexicon.supported_directive_types()

    def get_medical_terminology_categories(self) -> List[str]:
        return self.lexicon.terminology_categories()

    def cost_efficiency_summary(self) -> Dict[str, Any]:
        return self.stats_tracker.cost_efficiency_summary()
