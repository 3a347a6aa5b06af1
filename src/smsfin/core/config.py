"""Configuration settings for smsfin."""

import logging
import os

from pydantic import BaseModel, Field, field_validator


class AnomalyConfig(BaseModel):
    """Policy constants for the anomaly detectors."""

    # High-spending rule
    min_history: int = 3
    high_multiplier: float = 3.0
    very_high_multiplier: float = 5.0

    # Duplicate rule, measured back from the evaluation clock
    duplicate_window_minutes: int = 5

    # Night window, inclusive on both ends
    unusual_hour_start: int = Field(1, ge=0, le=23)
    unusual_hour_end: int = Field(5, ge=0, le=23)
    unusual_hour_min_amount: float = 50000.0

    # Budget usage thresholds, in percent of the category goal
    budget_warning_pct: float = 80.0
    budget_limit_pct: float = 100.0


class BudgetConfig(BaseModel):
    """Policy constants for the budget allocator."""

    default_monthly_income: float = Field(
        default_factory=lambda: float(os.getenv("SMSFIN_DEFAULT_MONTHLY_INCOME", "2000000"))
    )
    spending_ratio: float = Field(0.8, gt=0.0, le=1.0)
    rounding_step: int = Field(1000, gt=0)

    default_split: dict[str, float] = Field(
        default_factory=lambda: {
            "Alimentación": 0.3,
            "Transporte": 0.2,
            "Servicios": 0.2,
            "Compras": 0.3,
        }
    )


class AppConfig(BaseModel):
    """Application configuration."""

    anomaly: AnomalyConfig = Field(default_factory=AnomalyConfig)
    budget: BudgetConfig = Field(default_factory=BudgetConfig)

    log_level: str = Field(default_factory=lambda: os.getenv("SMSFIN_LOG_LEVEL", "INFO"), validate_default=True)
    slow_request_seconds: float = 0.1

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return level
