"""Deterministic demo activity generator.

Produces a plausible running week pattern so the dashboard and tests have
data when no live source is connected. Days 22-28 of the window form a
"peak build week" with longer sessions, no rest day and a higher heart
rate, so the 10-day spike and strain signals have something to show.
"""

from __future__ import annotations

from datetime import date, timedelta

from load_engine.models.enums import DEFAULT_WINDOW_DAYS
from load_engine.models.session import Session

# Base session duration in minutes by weekday (Monday = 0); Sunday is rest
_WEEKDAY_DURATION_MIN = (45.0, 65.0, 50.0, 70.0, 40.0, 90.0, 0.0)

_PEAK_WEEK_START = 22
_PEAK_WEEK_END = 28
_PEAK_VOLUME_FACTOR = 1.4
_PEAK_REST_DAY_DURATION_MIN = 45.0
_PEAK_HR_BOOST = 6
_BASE_HR = 138


def generate_demo_activities(
    days: int = DEFAULT_WINDOW_DAYS, end_date: date | None = None
) -> list[Session]:
    """Generate one session per training day for the window ending on *end_date*.

    Output depends only on *days* and *end_date*.
    """
    days = max(days, 1)
    if end_date is None:
        end_date = date.today()
    start_date = end_date - timedelta(days=days - 1)

    sessions: list[Session] = []
    for offset in range(days):
        day = start_date + timedelta(days=offset)
        in_peak_week = _PEAK_WEEK_START <= offset <= _PEAK_WEEK_END
        base_duration = _WEEKDAY_DURATION_MIN[day.weekday()]

        if in_peak_week:
            duration = (
                base_duration * _PEAK_VOLUME_FACTOR
                if base_duration > 0
                else _PEAK_REST_DAY_DURATION_MIN
            )
        else:
            duration = base_duration
        if duration <= 0:
            continue

        avg_hr = _BASE_HR + (offset % 7) * 3 + (offset // 7) % 4
        if in_peak_week:
            avg_hr += _PEAK_HR_BOOST

        sessions.append(Session(date=day, duration_min=duration, avg_hr=avg_hr))
    return sessions
