# ============================================================================
# src/directive_engine/external/base.py
# ============================================================================
"""
Base External Classifier Interface

Defines the contract of the second-tier classifier the escalation router
calls when local confidence is too low:

    classify(text) -> DirectiveAnalysis      (success)
    classify(text) raises ExternalClassifierError   (failure)

Supported backends:
- simulated: canned enhanced analysis, returned as a JSON payload
- unavailable: always fails (exercise the local fallback)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
from enum import Enum
import logging
import json

from json_repair import repair_json

from ..core.context.analysis import DirectiveAnalysis
from ..utils.exceptions import ExternalClassifierResponseError


class BackendType(Enum):
    """Supported external classifier backends."""
    SIMULATED = "simulated"
    UNAVAILABLE = "unavailable"


class BaseExternalClassifier(ABC):
    """
    Abstract base class for external directive classifiers.

    All backends must implement:
    - classify(): Async classification of raw directive text
    - health_check(): Verify backend is available
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = logging.getLogger(self.__class__.__name__)

        self._call_count = 0
        self._failure_count = 0

    @property
    @abstractmethod
    def backend_type(self) -> BackendType:
        """Return the backend type."""
        pass

    @abstractmethod
    async def classify(self, text: str) -> DirectiveAnalysis:
        """
        Classify raw directive text.

        Args:
            text: Raw (validated, un-normalized) directive text

        Returns:
            DirectiveAnalysis computed by the backend, with its own
            confidence and cost estimate

        Raises:
            ExternalClassifierError: backend unreachable or answered garbage
        """
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """
        Check if the backend is available.

        Returns:
            {
                "healthy": bool,
                "backend": str,
                "details": str
            }
        """
        pass

    def extract_json(self, response_text: str) -> Optional[Dict]:
        """
        Extract a JSON object from a backend response.

        Uses json_repair as fallback for malformed JSON (single quotes,
        trailing commas, surrounding prose).
        """
        if not response_text or not response_text.strip():
            self.logger.warning("Empty response text, no JSON to extract")
            return None

        try:
            return json.loads(response_text.strip())
        except json.JSONDecodeError:
            pass

        repaired = repair_json(response_text, return_objects=True)
        if isinstance(repaired, dict) and repaired:
            self.logger.debug("json_repair fixed external classifier response")
            return repaired

        self.logger.warning("No JSON object found in external classifier response")
        return None

    def parse_analysis_payload(self, response_text: str) -> DirectiveAnalysis:
        """
        Convert a JSON payload into a DirectiveAnalysis.

        Raises:
            ExternalClassifierResponseError: no JSON object, missing fields,
                unknown directive type, or scores outside [0, 1]
        """
        payload = self.extract_json(response_text)
        if not isinstance(payload, dict):
            raise ExternalClassifierResponseError(
                "External classifier returned no JSON object",
                {"backend": self.backend_type.value},
            )

        try:
            analysis = DirectiveAnalysis.from_dict(payload)
        except (KeyError, ValueError, TypeError) as e:
            raise ExternalClassifierResponseError(
                f"External classifier payload is malformed: {e}",
                {"backend": self.backend_type.value},
            ) from e

        scores = [analysis.confidence_score, analysis.legal_validity_score]
        scores.extend(d.confidence for d in analysis.extracted_directives)
        if any(not 0.0 <= score <= 1.0 for score in scores):
            raise ExternalClassifierResponseError(
                "External classifier returned a score outside [0, 1]",
                {"backend": self.backend_type.value},
            )

        return analysis

    def get_statistics(self) -> Dict[str, Any]:
        return {
            "backend": self.backend_type.value,
            "calls": self._call_count,
            "failures": self._failure_count,
        }
