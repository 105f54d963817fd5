# ============================================================================
# src/directive_engine/core/audit.py
# ============================================================================
"""
Audit Trail Sink

Every completed analysis is handed to an audit sink. Durable storage is
owned by whoever implements the sink; the engine only emits records.

LoggingAuditSink writes one JSON line per analysis through a dedicated,
non-propagating audit logger.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional
import logging

from .context.analysis import DirectiveAnalysis
from ..utils.logging import create_audit_logger


class AuditSink(ABC):
    """Append-only receiver of final analyses."""

    @abstractmethod
    def record(self, patient_id: str, analysis: DirectiveAnalysis) -> None:
        pass


class LoggingAuditSink(AuditSink):
    """
    Audit sink backed by the logging module.

    With a log file, records are JSON lines in that file. Without one they go
    to the 'audit.<name>' logger and whatever handlers the host attached.
    """

    def __init__(self, log_file: Optional[Path] = None, name: str = "directives"):
        if log_file is not None:
            self.logger = create_audit_logger(name, Path(log_file))
        else:
            self.logger = logging.getLogger(f"audit.{name}")

    def record(self, patient_id: str, analysis: DirectiveAnalysis) -> None:
        self.logger.info(
            "directive_analysis",
            extra={
                "event": "directive_analysis",
                "patient_id": patient_id,
                "processing_tier": analysis.processing_tier.value,
                "payload": analysis.to_dict(),
            },
        )
