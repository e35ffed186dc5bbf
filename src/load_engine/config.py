"""Environment-variable-based configuration and request clamping."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from load_engine.models.enums import (
    ACUTE_TIME_CONSTANT_DAYS,
    CHRONIC_TIME_CONSTANT_DAYS,
    DEFAULT_MAX_HR,
    DEFAULT_RESTING_HR,
    DEFAULT_SEED_DAYS,
    DEFAULT_WINDOW_DAYS,
)
from load_engine.models.settings import LoadSettings

MAX_HR: int = int(os.environ.get("LOAD_MAX_HR", str(DEFAULT_MAX_HR)))
RESTING_HR: int = int(os.environ.get("LOAD_RESTING_HR", str(DEFAULT_RESTING_HR)))
SEED_DAYS: int = int(os.environ.get("LOAD_SEED_DAYS", str(DEFAULT_SEED_DAYS)))
ACUTE_TC_DAYS: float = float(os.environ.get("LOAD_ACUTE_TC_DAYS", str(ACUTE_TIME_CONSTANT_DAYS)))
CHRONIC_TC_DAYS: float = float(
    os.environ.get("LOAD_CHRONIC_TC_DAYS", str(CHRONIC_TIME_CONSTANT_DAYS))
)
WINDOW_DAYS: int = int(os.environ.get("LOAD_DAYS", str(DEFAULT_WINDOW_DAYS)))

# Request bounds applied by integration callers; the engine accepts any days >= 1
DAYS_RANGE = (7, 120)
MAX_HR_RANGE = (120, 230)
RESTING_HR_RANGE = (30, 90)


def settings_from_env(environ: Mapping[str, str] | None = None) -> LoadSettings:
    """Build LoadSettings from ``LOAD_*`` variables, falling back to defaults.

    Raises:
        ValueError: If a variable is set but not numeric.
        InvalidSettingsError: If a value is out of range.
    """
    env = os.environ if environ is None else environ
    return LoadSettings(
        max_hr=int(env.get("LOAD_MAX_HR", DEFAULT_MAX_HR)),
        resting_hr=int(env.get("LOAD_RESTING_HR", DEFAULT_RESTING_HR)),
        seed_days=int(env.get("LOAD_SEED_DAYS", DEFAULT_SEED_DAYS)),
        acute_time_constant_days=float(env.get("LOAD_ACUTE_TC_DAYS", ACUTE_TIME_CONSTANT_DAYS)),
        chronic_time_constant_days=float(
            env.get("LOAD_CHRONIC_TC_DAYS", CHRONIC_TIME_CONSTANT_DAYS)
        ),
    )


def _clamp_int(value: Any, bounds: tuple[int, int], default: int) -> int:
    """Parse *value* as int and clamp it; None or garbage gives *default*."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    low, high = bounds
    return max(low, min(high, parsed))


def clamp_days(value: Any) -> int:
    return _clamp_int(value, DAYS_RANGE, DEFAULT_WINDOW_DAYS)


def clamp_max_hr(value: Any) -> int:
    return _clamp_int(value, MAX_HR_RANGE, DEFAULT_MAX_HR)


def clamp_resting_hr(value: Any) -> int:
    return _clamp_int(value, RESTING_HR_RANGE, DEFAULT_RESTING_HR)
