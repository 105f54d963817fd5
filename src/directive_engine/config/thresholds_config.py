# ============================================================================
# src/directive_engine/config/thresholds_config.py
# ============================================================================
"""
Confidence Thresholds
- Per-directive acceptance thresholds
- Human review escalation
- Local/hybrid escalation cutoff
"""

from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings

from ..constants.directive_types import DirectiveType

class ThresholdSettings(BaseSettings):
    DNR_THRESHOLD: float = Field(
        default=0.85,
        ge=0.0, le=1.0,
        description="Minimum boosted keyword confidence to accept a DNR directive"
    )
    ORGAN_DONATION_THRESHOLD: float = Field(
        default=0.80,
        ge=0.0, le=1.0,
        description="Minimum boosted keyword confidence to accept an organ donation directive"
    )
    DATA_CONSENT_THRESHOLD: float = Field(
        default=0.75,
        ge=0.0, le=1.0,
        description="Minimum boosted keyword confidence to accept a data-sharing consent"
    )
    POWER_OF_ATTORNEY_THRESHOLD: float = Field(
        default=0.88,
        ge=0.0, le=1.0,
        description="Minimum boosted keyword confidence to accept a power of attorney"
    )
    LIVING_WILL_THRESHOLD: float = Field(
        default=0.82,
        ge=0.0, le=1.0,
        description="Minimum boosted keyword confidence to accept a living will"
    )
    REVIEW_THRESHOLD: float = Field(
        default=0.85,
        ge=0.0, le=1.0,
        description="Below this aggregate confidence, flag the analysis for human review"
    )
    ESCALATION_CONFIDENCE_CUTOFF: float = Field(
        default=0.90,
        ge=0.0, le=1.0,
        description="Local confidence at or above this is accepted without escalation"
    )

    def directive_thresholds(self) -> Dict[DirectiveType, float]:
        """Per-type thresholds keyed by DirectiveType."""
        return {
            DirectiveType.DNR: self.DNR_THRESHOLD,
            DirectiveType.ORGAN_DONATION: self.ORGAN_DONATION_THRESHOLD,
            DirectiveType.DATA_CONSENT: self.DATA_CONSENT_THRESHOLD,
            DirectiveType.POWER_OF_ATTORNEY: self.POWER_OF_ATTORNEY_THRESHOLD,
            DirectiveType.LIVING_WILL: self.LIVING_WILL_THRESHOLD,
        }

threshold_settings = ThresholdSettings()
