# ============================================================================
# src/directive_engine/external/simulated_client.py
# ============================================================================
"""
Simulated External Classifier

Stands in for an off-box classification service. It answers every request
with the same enhanced analysis, serialized as JSON and parsed back the way
a remote payload would be, so the full escalation/merge path runs without
any network dependency.

Config options:
    simulated_payload: JSON text to return instead of the default analysis
    simulated_latency_seconds: artificial delay before answering (default: 0)
"""

import asyncio
import json
from typing import Dict, Any, Optional

from .base import BaseExternalClassifier, BackendType
from ..core.context.analysis import DirectiveAnalysis


DEFAULT_ENHANCED_ANALYSIS = {
    "confidence_score": 0.88,
    "extracted_directives": [
        {
            "directive_type": "DNR",
            "conditions": ["Recovery probability < 5%"],
            "confidence": 0.92,
            "matched_text": "Enhanced external extraction",
            "medical_terminology": ["terminal condition", "palliative care"],
        }
    ],
    "contraindications": ["Requires medical review"],
    "legal_validity_score": 0.85,
    "requires_human_review": True,
    "cost_estimate_usd": 0.04,
}


class SimulatedExternalClassifier(BaseExternalClassifier):

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.payload = self.config.get(
            'simulated_payload', json.dumps(DEFAULT_ENHANCED_ANALYSIS)
        )
        self.latency_seconds = self.config.get('simulated_latency_seconds', 0.0)

    @property
    def backend_type(self) -> BackendType:
        return BackendType.SIMULATED

    async def classify(self, text: str) -> DirectiveAnalysis:
        self._call_count += 1
        if self.latency_seconds:
            await asyncio.sleep(self.latency_seconds)

        try:
            return self.parse_analysis_payload(self.payload)
        except Exception:
            self._failure_count += 1
            raise

    async def health_check(self) -> Dict[str, Any]:
        return {
            "healthy": True,
            "backend": self.backend_type.value,
            "details": "Simulated backend, canned analysis",
        }
