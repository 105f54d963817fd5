# ============================================================================
# src/directive_engine/core/__init__.py
# ============================================================================
"""
Core components for the directive engine.

The router and engine depend on the external classifiers package, which in
turn depends on core.context, so they are imported from their modules (or
from the top-level package) rather than re-exported here.
"""

from .context import (
    ProcessingTier,
    ExtractedDirective,
    DirectiveAnalysis,
    EscalationFailure,
)
from .lexicon import LexiconStore
from .merger import ResultMerger, deduplicate_directives
from .stats import (
    ProcessingStats,
    StatsTracker,
    estimate_processing_cost,
    cost_savings_pct,
)
from .audit import AuditSink, LoggingAuditSink

__all__ = [
    # Results
    'ProcessingTier',
    'ExtractedDirective',
    'DirectiveAnalysis',
    'EscalationFailure',

    # Components
    'LexiconStore',
    'ResultMerger',
    'deduplicate_directives',
    'ProcessingStats',
    'StatsTracker',
    'estimate_processing_cost',
    'cost_savings_pct',

    # Audit
    'AuditSink',
    'LoggingAuditSink',
]
