"""Daily load aggregation and the seeded acute/chronic filter pair.

Both filters are first-order exponential smoothers driven once per calendar
day, including rest days:

    acc <- acc + alpha × (daily_load - acc),   alpha = 1 - e^(-1/tau)

Starting both accumulators at zero makes the slow (chronic) filter lag the
fast (acute) one for weeks, so the balance sits deep in the negative for an
athlete who has trained consistently all along. Both are therefore seeded
with the mean raw daily load of the first ``seed_days`` of the window.

References:
    - Banister et al. (1975): impulse-response model of performance
    - Coggan: CTL/ATL/TSB as exponentially weighted load averages
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from datetime import date, timedelta

import numpy as np
import pandas as pd

from load_engine.math.trimp import calculate_zone_trimp
from load_engine.models.enums import DEFAULT_MAX_HR, DEFAULT_RESTING_HR
from load_engine.models.load import LoadPoint
from load_engine.models.session import Session


def window_start(end_date: date, days: int) -> date:
    """First calendar day of a *days*-long window ending on *end_date*."""
    return end_date - timedelta(days=days - 1)


def aggregate_daily_loads(
    sessions: Iterable[Session],
    start_date: date,
    end_date: date,
    max_hr: int = DEFAULT_MAX_HR,
    resting_hr: int = DEFAULT_RESTING_HR,
) -> dict[date, float]:
    """Sum session scores per calendar day within ``[start_date, end_date]``.

    Days without sessions are absent from the result.
    """
    loads: dict[date, float] = {}
    for session in sessions:
        if not start_date <= session.date <= end_date:
            continue
        score = calculate_zone_trimp(session.duration_min, session.avg_hr, max_hr, resting_hr)
        loads[session.date] = loads.get(session.date, 0.0) + score
    return loads


def daily_load_series(
    daily_loads: dict[date, float], start_date: date, days: int
) -> pd.Series:
    """Expand a sparse date → load map into a dense daily series (rest days = 0)."""
    index = pd.date_range(start=start_date, periods=days, freq="D")
    values = [daily_loads.get(ts.date(), 0.0) for ts in index]
    return pd.Series(values, index=index, dtype=np.float64)


def smoothing_alpha(time_constant_days: float) -> float:
    """Per-day smoothing coefficient for a filter with time constant *tau*."""
    return 1.0 - math.exp(-1.0 / time_constant_days)


def calculate_seed(loads: Sequence[float] | pd.Series, seed_days: int) -> float:
    """Mean raw daily load over the first ``min(seed_days, len(loads))`` days."""
    head = np.asarray(loads, dtype=np.float64)[:seed_days]
    if head.size == 0:
        return 0.0
    return float(np.mean(head))


def calculate_seeded_ewma(
    loads: Sequence[float] | pd.Series, time_constant_days: float, seed: float
) -> np.ndarray:
    """Run one filter over *loads*, starting from *seed*.

    Returns the filter value after each day's update (same length as
    *loads*), so a day's training is already reflected in that day's value.
    """
    values = np.concatenate(([seed], np.asarray(loads, dtype=np.float64)))
    # adjust=False gives the recursive form; the seed occupies position 0
    smoothed = (
        pd.Series(values, dtype=np.float64)
        .ewm(alpha=smoothing_alpha(time_constant_days), adjust=False)
        .mean()
    )
    return smoothed.to_numpy()[1:]


def build_load_series(
    loads: pd.Series,
    acute_time_constant_days: float,
    chronic_time_constant_days: float,
    seed_days: int,
) -> tuple[LoadPoint, ...]:
    """Drive the acute/chronic filter pair over a dense daily series.

    Args:
        loads: Daily raw loads indexed by consecutive calendar days.
        acute_time_constant_days: Time constant of the fast (ATL) filter.
        chronic_time_constant_days: Time constant of the slow (CTL) filter.
        seed_days: Number of leading days averaged to seed both filters.

    Returns:
        One LoadPoint per day, oldest first.
    """
    seed = calculate_seed(loads, seed_days)
    acute = calculate_seeded_ewma(loads, acute_time_constant_days, seed)
    chronic = calculate_seeded_ewma(loads, chronic_time_constant_days, seed)

    points: list[LoadPoint] = []
    for i, (ts, load) in enumerate(loads.items()):
        ctl = float(chronic[i])
        atl = float(acute[i])
        points.append(
            LoadPoint(date=ts.date(), load=float(load), chronic=ctl, acute=atl, balance=ctl - atl)
        )
    return tuple(points)
