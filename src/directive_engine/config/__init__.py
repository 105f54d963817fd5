# ============================================================================
# src/directive_engine/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .thresholds_config import threshold_settings, ThresholdSettings
from .routing_config import routing_settings, RoutingSettings
from .logging_config import logging_settings, LoggingSettings
