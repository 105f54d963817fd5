# ============================================================================
# src/directive_engine/utils/__init__.py
# ============================================================================
"""
Utility modules for the directive engine.
"""

from .exceptions import (
    DirectiveEngineError,
    InvalidInputError,
    ConfigurationError,
    ExternalClassifierError,
    ExternalClassifierUnavailableError,
    ExternalClassifierResponseError,
)

from .logging import (
    setup_logging,
    JsonFormatter,
    LogAdapter,
    create_audit_logger,
)

from .text_normalizer import validate_directive_text, normalize_text

__all__ = [
    # Exceptions
    'DirectiveEngineError',
    'InvalidInputError',
    'ConfigurationError',
    'ExternalClassifierError',
    'ExternalClassifierUnavailableError',
    'ExternalClassifierResponseError',
    # Logging
    'setup_logging',
    'JsonFormatter',
    'LogAdapter',
    'create_audit_logger',
    # Text
    'validate_directive_text',
    'normalize_text',
]
