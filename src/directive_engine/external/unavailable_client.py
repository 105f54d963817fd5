# ============================================================================
# src/directive_engine/external/unavailable_client.py
# ============================================================================
"""
Unavailable External Classifier

Backend for deployments without a second tier: every escalation fails and
the router falls back to the local analysis.
"""

from typing import Dict, Any

from .base import BaseExternalClassifier, BackendType
from ..core.context.analysis import DirectiveAnalysis
from ..utils.exceptions import ExternalClassifierUnavailableError


class UnavailableExternalClassifier(BaseExternalClassifier):

    @property
    def backend_type(self) -> BackendType:
        return BackendType.UNAVAILABLE

    async def classify(self, text: str) -> DirectiveAnalysis:
        self._call_count += 1
        self._failure_count += 1
        raise ExternalClassifierUnavailableError(
            "No external classifier is configured",
            {"backend": self.backend_type.value},
        )

    async def health_check(self) -> Dict[str, Any]:
        return {
            "healthy": False,
            "backend": self.backend_type.value,
            "details": "External classification disabled",
        }
