# ============================================================================
# src/directive_engine/core/stats.py
# ============================================================================
"""
Cost & Processing Statistics

- Per-tier cost model (fixed local cost, length-scaled hybrid cost)
- Cost savings against sending everything to the external classifier
- Process-wide running statistics

StatsTracker.record() is the only writer. It holds a lock around the
read-modify-write of the running means, so the tier counters always add
up to total_processed. Readers get copies.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
import logging
import threading

from .context.enums import ProcessingTier
from ..config.routing_config import routing_settings

logger = logging.getLogger(__name__)


def estimate_processing_cost(
    tier: ProcessingTier,
    text_length: int,
    config: Optional[Dict[str, Any]] = None
) -> float:
    """
    Estimated USD cost of one request.

    LOCAL is a fixed small cost. HYBRID starts at the hybrid base cost and
    scales linearly once the text exceeds the baseline length.
    """
    config = config or {}
    if tier == ProcessingTier.LOCAL:
        return config.get('local_cost_usd', routing_settings.LOCAL_COST_USD)

    base_cost = config.get('hybrid_base_cost_usd', routing_settings.HYBRID_BASE_COST_USD)
    baseline_chars = config.get(
        'hybrid_cost_baseline_chars', routing_settings.HYBRID_COST_BASELINE_CHARS
    )
    return base_cost * max(text_length / baseline_chars, 1.0)


def cost_savings_pct(cost: float, full_external_cost: Optional[float] = None) -> float:
    """Percentage saved versus the full external-classifier baseline."""
    baseline = full_external_cost or routing_settings.FULL_EXTERNAL_COST_USD
    return (baseline - cost) / baseline * 100.0


def _running_mean(old_mean: float, value: float, count: int) -> float:
    return (old_mean * (count - 1) + value) / count


@dataclass
class ProcessingStats:
    total_processed: int = 0
    local_tier_count: int = 0
    hybrid_tier_count: int = 0
    escalation_failure_count: int = 0
    avg_confidence: float = 0.0
    avg_latency_ms: float = 0.0
    avg_cost_savings_pct: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_processed": self.total_processed,
            "local_tier_count": self.local_tier_count,
            "hybrid_tier_count": self.hybrid_tier_count,
            "escalation_failure_count": self.escalation_failure_count,
            "avg_confidence": self.avg_confidence,
            "avg_latency_ms": self.avg_latency_ms,
            "avg_cost_savings_pct": self.avg_cost_savings_pct,
        }


class StatsTracker:
    """
    Owner of the process-wide ProcessingStats.

    Pure bookkeeping: nothing here feeds back into classification.
    """

    def __init__(self, full_external_cost: Optional[float] = None):
        self.full_external_cost = full_external_cost or routing_settings.FULL_EXTERNAL_COST_USD
        self._stats = ProcessingStats()
        self._lock = threading.Lock()

    def record(
        self,
        tier: ProcessingTier,
        confidence: float,
        latency_ms: float,
        cost: float,
        escalation_failed: bool = False
    ) -> ProcessingStats:
        """
        Fold one completed request into the running statistics.

        Returns:
            Snapshot taken right after the update
        """
        savings = cost_savings_pct(cost, self.full_external_cost)

        with self._lock:
            stats = self._stats
            stats.total_processed += 1
            if tier == ProcessingTier.LOCAL:
                stats.local_tier_count += 1
            else:
                stats.hybrid_tier_count += 1
            if escalation_failed:
                stats.escalation_failure_count += 1

            n = stats.total_processed
            stats.avg_confidence = _running_mean(stats.avg_confidence, confidence, n)
            stats.avg_latency_ms = _running_mean(stats.avg_latency_ms, latency_ms, n)
            stats.avg_cost_savings_pct = _running_mean(stats.avg_cost_savings_pct, savings, n)

            snapshot = replace(stats)

        logger.debug(
            f"Stats updated: {snapshot.total_processed} processed "
            f"({snapshot.local_tier_count} local / {snapshot.hybrid_tier_count} hybrid)"
        )
        return snapshot

    def snapshot(self) -> ProcessingStats:
        with self._lock:
            return replace(self._stats)

    def cost_efficiency_summary(self) -> Dict[str, Any]:
        """Cost efficiency of the two-tier routing, from live statistics."""
        stats = self.snapshot()
        local_share = (
            stats.local_tier_count / stats.total_processed * 100.0
            if stats.total_processed else 0.0
        )
        avg_cost = self.full_external_cost * (1.0 - stats.avg_cost_savings_pct / 100.0)

        return {
            "full_external_cost_usd": self.full_external_cost,
            "average_cost_usd": avg_cost if stats.total_processed else 0.0,
            "average_cost_savings_pct": stats.avg_cost_savings_pct,
            "local_share_pct": local_share,
            "total_processed": stats.total_processed,
            "escalation_failures": stats.escalation_failure_count,
            "average_latency_ms": stats.avg_latency_ms,
        }
