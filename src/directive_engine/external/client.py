# ============================================================================
# src/directive_engine/external/client.py
# ============================================================================
"""
External Classifier Factory

Usage:
    from directive_engine.external.client import create_classifier

    classifier = create_classifier({'backend': 'simulated'})
    analysis = await classifier.classify("I do not want CPR...")
"""

from typing import Dict, Any, Optional
import logging

from .base import BaseExternalClassifier, BackendType
from .simulated_client import SimulatedExternalClassifier
from .unavailable_client import UnavailableExternalClassifier
from ..config.routing_config import routing_settings
from ..utils.exceptions import ConfigurationError

_logger = logging.getLogger(__name__)

_BACKENDS = {
    BackendType.SIMULATED.value: SimulatedExternalClassifier,
    BackendType.UNAVAILABLE.value: UnavailableExternalClassifier,
}


def create_classifier(config: Optional[Dict[str, Any]] = None) -> BaseExternalClassifier:
    """
    Factory function to create an external classifier.

    Args:
        config: Configuration dict with at minimum:
            - backend: "simulated" | "unavailable"
              (default: EXTERNAL_CLASSIFIER_BACKEND setting)
            Remaining keys are passed to the backend.

    Returns:
        Configured external classifier instance

    Raises:
        ConfigurationError: unknown backend name
    """
    config = dict(config or {})
    backend = str(config.pop('backend', routing_settings.EXTERNAL_CLASSIFIER_BACKEND)).lower()

    classifier_cls = _BACKENDS.get(backend)
    if classifier_cls is None:
        raise ConfigurationError(
            f"Unknown external classifier backend: {backend}",
            {"backend": backend, "supported": sorted(_BACKENDS)},
        )

    _logger.info(f"Creating external classifier: {backend}")
    return classifier_cls(config)
