"""Application configuration with validation of the scoring parameters."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# SLA RISK SCALE
# =============================================================================
# Maps the 0-8 SLA risk scale to the response-time band it stands for.
# Higher = stricter SLA, harsher penalties on breach.
# =============================================================================

SLA_RISK_LEVELS: dict[int, str] = {
    0: "No defined risk",
    1: "Minimal",
    2: "Low",
    3: "Moderate",
    4: "Elevated",
    5: "High",
    6: "Very high (4-6h response)",
    7: "Severe (2-4h response)",
    8: "Critical (< 2h response)",
}


def describe_sla_risk(scale: int) -> str:
    """
    Get the description of an SLA risk scale value.

    Args:
        scale: SLA risk scale (0-8)

    Returns:
        Human-readable description, or "Unknown" for out-of-range values
    """
    return SLA_RISK_LEVELS.get(scale, "Unknown")


class Settings(BaseSettings):
    """Application settings with validated scoring parameters."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "HealthOps Tender Scoring"
    APP_VERSION: str = "3.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Capacity constants
    MONTHLY_HOURS_PER_PROFESSIONAL: int = Field(default=160, ge=1, le=744)
    UNITS_PER_HOUR: float = Field(default=2.0, gt=0, le=100)

    # Economics
    BASE_COST_RATIO: float = Field(default=0.65, ge=0.0, lt=1.0)
    OVER_CAPACITY_SURCHARGE: float = Field(default=0.15, ge=0.0, le=1.0)
    DEFAULT_REGULAR_FRACTION: float = Field(default=0.7, ge=0.0, le=1.0)
    DEFAULT_URGENT_FRACTION: float = Field(default=0.3, ge=0.0, le=1.0)

    # Decision thresholds
    RISK_VETO_MIN: int = Field(default=7, ge=0, le=8)
    MARGIN_FLOOR_PCT: float = Field(default=15.0, ge=0, le=100)
    PARTICIPATE_RISK_MAX: int = Field(default=3, ge=0, le=8)
    PARTICIPATE_MARGIN_MIN_PCT: float = Field(default=25.0, ge=0, le=100)
    OVERLOAD_UTILIZATION_PCT: float = Field(default=90.0, gt=0, le=200)

    @model_validator(mode="after")
    def validate_decision_thresholds(self):
        """Participation band must sit strictly inside the veto band."""
        if self.PARTICIPATE_RISK_MAX >= self.RISK_VETO_MIN:
            raise ValueError(
                f"PARTICIPATE_RISK_MAX ({self.PARTICIPATE_RISK_MAX}) must be below "
                f"RISK_VETO_MIN ({self.RISK_VETO_MIN})"
            )
        if self.MARGIN_FLOOR_PCT > self.PARTICIPATE_MARGIN_MIN_PCT:
            raise ValueError(
                f"MARGIN_FLOOR_PCT ({self.MARGIN_FLOOR_PCT}) must not exceed "
                f"PARTICIPATE_MARGIN_MIN_PCT ({self.PARTICIPATE_MARGIN_MIN_PCT})"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
