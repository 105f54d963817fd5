# ============================================================================
# src/directive_engine/external/__init__.py
# ============================================================================
"""
External (second-tier) directive classifiers.

Usage:
    from directive_engine.external import create_classifier

    classifier = create_classifier({'backend': 'simulated'})
"""

from .base import BaseExternalClassifier, BackendType
from .simulated_client import SimulatedExternalClassifier, DEFAULT_ENHANCED_ANALYSIS
from .unavailable_client import UnavailableExternalClassifier
from .client import create_classifier

__all__ = [
    'BaseExternalClassifier',
    'BackendType',
    'SimulatedExternalClassifier',
    'DEFAULT_ENHANCED_ANALYSIS',
    'UnavailableExternalClassifier',
    'create_classifier',
]
