# ============================================================================
# src/directive_engine/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the directive engine.

Every error carries a machine-readable ``kind`` and a ``context`` dict so
failures can be reported as structured results instead of bare strings.
"""

from typing import Any, Dict, Optional


class DirectiveEngineError(Exception):
    """Base exception for all directive engine errors."""

    kind = "DirectiveEngineError"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "context": dict(self.context),
        }


class InvalidInputError(DirectiveEngineError):
    """Malformed or oversized directive text, rejected before normalization."""

    kind = "InvalidInput"


class ConfigurationError(DirectiveEngineError):
    """Invalid lexicon or threshold configuration."""

    kind = "ConfigurationError"


class ExternalClassifierError(DirectiveEngineError):
    """Base class for failures of the external classifier collaborator."""

    kind = "ExternalClassifierUnavailable"


class ExternalClassifierUnavailableError(ExternalClassifierError):
    """External classifier could not be reached or refused the request."""
    pass


class ExternalClassifierResponseError(ExternalClassifierError):
    """External classifier answered with a payload that cannot be used."""
    pass
