"""Per-invocation engine configuration."""

from __future__ import annotations

from dataclasses import dataclass

from load_engine.exceptions import InvalidSettingsError
from load_engine.models.enums import (
    ACUTE_TIME_CONSTANT_DAYS,
    CHRONIC_TIME_CONSTANT_DAYS,
    DEFAULT_MAX_HR,
    DEFAULT_RESTING_HR,
    DEFAULT_SEED_DAYS,
)


@dataclass(frozen=True)
class LoadSettings:
    """Scorer and filter parameters supplied by the caller.

    ``max_hr <= resting_hr`` is accepted; the scorer floors the heart-rate
    reserve to 1 bpm instead.
    """

    max_hr: int = DEFAULT_MAX_HR
    resting_hr: int = DEFAULT_RESTING_HR
    seed_days: int = DEFAULT_SEED_DAYS
    acute_time_constant_days: float = ACUTE_TIME_CONSTANT_DAYS
    chronic_time_constant_days: float = CHRONIC_TIME_CONSTANT_DAYS

    def __post_init__(self) -> None:
        if self.seed_days < 1:
            raise InvalidSettingsError(f"seed_days must be >= 1, got {self.seed_days}")
        if self.acute_time_constant_days <= 0:
            raise InvalidSettingsError(
                f"acute_time_constant_days must be > 0, got {self.acute_time_constant_days}"
            )
        if self.chronic_time_constant_days <= 0:
            raise InvalidSettingsError(
                f"chronic_time_constant_days must be > 0, got {self.chronic_time_constant_days}"
            )
