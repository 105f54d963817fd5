# ============================================================================
# src/directive_engine/config/routing_config.py
# ============================================================================
"""
Routing & Cost Settings
- Input limits
- External classifier backend and timeout
- Per-tier cost model
"""

from pydantic import Field
from pydantic_settings import BaseSettings

class RoutingSettings(BaseSettings):
    MAX_INPUT_CHARS: int = Field(
        default=10_000,
        gt=0,
        description="Directive text longer than this is rejected as invalid input"
    )
    REVIEW_LENGTH_CAP: int = Field(
        default=1000,
        gt=0,
        description="Normalized text longer than this always requires human review"
    )
    EXTERNAL_CLASSIFIER_BACKEND: str = Field(
        default="simulated",
        description="External classifier backend: 'simulated' or 'unavailable'"
    )
    EXTERNAL_CLASSIFIER_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0.0,
        description="Escalations taking longer than this fall back to the local result"
    )
    ESCALATE_ON_NO_MATCH: bool = Field(
        default=True,
        description="Escalate even when no directive matched locally (zero confidence)"
    )
    LOCAL_COST_USD: float = Field(
        default=0.01,
        ge=0.0,
        description="Fixed cost of a local-only classification"
    )
    HYBRID_BASE_COST_USD: float = Field(
        default=0.02,
        ge=0.0,
        description="Hybrid cost for texts up to HYBRID_COST_BASELINE_CHARS"
    )
    HYBRID_COST_BASELINE_CHARS: int = Field(
        default=1000,
        gt=0,
        description="Hybrid cost scales linearly with text length above this"
    )
    FULL_EXTERNAL_COST_USD: float = Field(
        default=0.26,
        gt=0.0,
        description="Cost of sending every request to the external classifier (savings baseline)"
    )

routing_settings = RoutingSettings()
