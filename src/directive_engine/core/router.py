# ============================================================================
# src/directive_engine/core/router.py
# ============================================================================
"""
Escalation Router - LOCAL vs HYBRID

    local confidence >= cutoff (0.90)  → accept local analysis (LOCAL)
    otherwise                          → external classifier (HYBRID)
        success                        → ResultMerger
        failure / timeout              → local analysis, still HYBRID,
                                         with a structured escalation_error

One escalation attempt per request, no retries. The external call is the
only await in a classification and always runs under a timeout.
"""

from dataclasses import replace
from typing import Any, Dict, Optional
import asyncio
import logging

from .context.analysis import DirectiveAnalysis, EscalationFailure
from .context.enums import ProcessingTier
from .merger import ResultMerger
from ..config.thresholds_config import threshold_settings
from ..config.routing_config import routing_settings
from ..external.base import BaseExternalClassifier
from ..utils.exceptions import ExternalClassifierError, ExternalClassifierUnavailableError

logger = logging.getLogger(__name__)


class EscalationRouter:
    """
    Decides whether a local analysis stands or is escalated.

    Config options:
        escalation_cutoff: local confidence accepted as final (default: 0.90)
        timeout_seconds: external classifier timeout (default: 10.0)
        escalate_on_no_match: escalate zero-match results (default: True)
    """

    def __init__(
        self,
        external_classifier: BaseExternalClassifier,
        merger: Optional[ResultMerger] = None,
        config: Optional[Dict[str, Any]] = None
    ):
        self.config = config or {}
        self.external_classifier = external_classifier
        self.merger = merger or ResultMerger()

        self.escalation_cutoff = self.config.get(
            'escalation_cutoff', threshold_settings.ESCALATION_CONFIDENCE_CUTOFF
        )
        self.timeout_seconds = self.config.get(
            'timeout_seconds', routing_settings.EXTERNAL_CLASSIFIER_TIMEOUT_SECONDS
        )
        self.escalate_on_no_match = self.config.get(
            'escalate_on_no_match', routing_settings.ESCALATE_ON_NO_MATCH
        )

    def should_escalate(self, local: DirectiveAnalysis) -> bool:
        if local.confidence_score >= self.escalation_cutoff:
            return False
        if not local.extracted_directives and not self.escalate_on_no_match:
            return False
        return True

    async def route(
        self,
        text: str,
        local: DirectiveAnalysis,
        review_markers: bool = False
    ) -> DirectiveAnalysis:
        """
        Route a local analysis to its final form.

        Args:
            text: Raw directive text (sent to the external classifier as-is)
            local: LocalClassifier output
            review_markers: input-level review triggers, kept on merge

        Returns:
            Final analysis tagged LOCAL or HYBRID
        """
        if not self.should_escalate(local):
            logger.info(
                f"Accepting local analysis (confidence {local.confidence_score:.2f})"
            )
            return replace(local, processing_tier=ProcessingTier.LOCAL)

        logger.info(
            f"Escalating to {self.external_classifier.backend_type.value} classifier "
            f"(local confidence {local.confidence_score:.2f} < {self.escalation_cutoff:.2f})"
        )

        try:
            external = await asyncio.wait_for(
                self.external_classifier.classify(text),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            error = ExternalClassifierUnavailableError(
                f"External classifier timed out after {self.timeout_seconds}s",
                {"reason": "timeout", "timeout_seconds": self.timeout_seconds},
            )
            return self._fallback(local, error)
        except OSError as e:
            error = ExternalClassifierUnavailableError(
                f"External classifier unreachable: {e}",
                {"reason": "unreachable"},
            )
            return self._fallback(local, error)
        except ExternalClassifierError as e:
            return self._fallback(local, e)

        return self.merger.merge(local, external, review_markers=review_markers)

    def _fallback(
        self,
        local: DirectiveAnalysis,
        error: ExternalClassifierError
    ) -> DirectiveAnalysis:
        """Local result reported as an attempted (failed) escalation."""
        logger.warning(f"Escalation failed, using local analysis: {error.message}")

        context = {"backend": self.external_classifier.backend_type.value}
        context.update(error.context)

        return replace(
            local,
            processing_tier=ProcessingTier.HYBRID,
            escalation_error=EscalationFailure(
                kind=error.kind,
                message=error.message,
                context=context,
            ),
        )
