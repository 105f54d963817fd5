# ============================================================================
# src/directive_engine/config/logging_config.py
# ============================================================================
"""
Logging & Audit Settings
- Log level and format
- Audit trail
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

class LoggingSettings(BaseSettings):
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit console logs as JSON lines"
    )
    ENABLE_AUDIT_TRAIL: bool = Field(
        default=True,
        description="Send every completed analysis to the audit sink"
    )
    AUDIT_LOG_PATH: Optional[Path] = Field(
        default=None,
        description="JSON-lines audit file; audit records go to the 'audit' logger only when unset"
    )

logging_settings = LoggingSettings()
