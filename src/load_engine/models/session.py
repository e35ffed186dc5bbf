"""Exercise session record: the only input the engine reads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Session:
    """One completed exercise session.

    Sessions without heart-rate data are kept; they contribute duration to
    the recent volume but no training load.
    """

    date: date
    duration_min: float
    avg_hr: int | None = None
