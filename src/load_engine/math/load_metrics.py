"""Derived load metrics: ACWR, monotony, ramp rate, 10-day spike and strain.

Every function here is a reduction over an already computed load series, so
a persisted series can be audited without re-running the filters.

References:
    - Gabbett (2016): acute:chronic workload ratio and injury risk
    - Foster (1998): training monotony and strain
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

import numpy as np

from load_engine.models.enums import (
    ACWR_MIN_CHRONIC,
    MEAN_EPSILON,
    MONOTONY_WINDOW_DAYS,
    NEUTRAL_RATIO,
    RAMP_LOOKBACK_DAYS,
    RECENT_VOLUME_DAYS,
    SHORT_WINDOW_DAYS,
    SPIKE_MIN_BASELINE,
    STD_EPSILON,
)
from load_engine.models.load import LoadMetrics, LoadPoint
from load_engine.models.session import Session


def calculate_recent_volume(
    sessions: Iterable[Session], end_date: date, days: int = RECENT_VOLUME_DAYS
) -> float:
    """Total session minutes over the *days* days ending on *end_date* (inclusive).

    Counts duration, not load, and ignores the length of the filter window.
    """
    start = end_date - timedelta(days=days - 1)
    return float(sum(s.duration_min for s in sessions if start <= s.date <= end_date))


def calculate_acwr(acute: float, chronic: float) -> float:
    """Acute:chronic workload ratio from the two filter outputs.

    This is the filter-based ("uncoupled EWMA") ratio, not the rolling-sum
    variant; downstream bands are tuned against it. Returns the neutral 1.0
    while chronic load is at or below 1.0.
    """
    if chronic > ACWR_MIN_CHRONIC:
        return acute / chronic
    return NEUTRAL_RATIO


def calculate_monotony(daily_loads: Sequence[float]) -> float:
    """Foster monotony over the most recent 7 daily loads.

    Monotony = mean / population std. Returns 0.0 when either is
    negligible, which includes perfectly constant loads.
    """
    recent = np.asarray(daily_loads, dtype=np.float64)[-MONOTONY_WINDOW_DAYS:]
    if recent.size == 0:
        return 0.0
    mean = float(np.mean(recent))
    std = float(np.std(recent, ddof=0))
    if std > STD_EPSILON and mean > MEAN_EPSILON:
        return mean / std
    return 0.0


def calculate_ramp_rate(chronic_values: Sequence[float]) -> float:
    """Change in chronic load over the last 7 days.

    Falls back to the change since the first day for series shorter than
    8 points, and to 0.0 for a single point.
    """
    n = len(chronic_values)
    if n > RAMP_LOOKBACK_DAYS:
        return chronic_values[-1] - chronic_values[-1 - RAMP_LOOKBACK_DAYS]
    if n >= 2:
        return chronic_values[-1] - chronic_values[0]
    return 0.0


def calculate_spike_ratio(daily_loads: Sequence[float]) -> float:
    """Mean load of the last 10 days relative to the whole-window mean.

    Returns the neutral 1.0 when the window baseline is negligible.
    """
    loads = np.asarray(daily_loads, dtype=np.float64)
    if loads.size == 0:
        return NEUTRAL_RATIO
    window_avg = float(np.mean(loads))
    if window_avg <= SPIKE_MIN_BASELINE:
        return NEUTRAL_RATIO
    last10 = loads[-SHORT_WINDOW_DAYS:]
    return float(np.sum(last10)) / (last10.size * window_avg)


def calculate_strain(daily_loads: Sequence[float]) -> float:
    """Foster strain over the last 10 days: mean load × monotony.

    Near-zero mean load yields 0.0 regardless of variance.
    """
    last10 = np.asarray(daily_loads, dtype=np.float64)[-SHORT_WINDOW_DAYS:]
    if last10.size < 2:
        return 0.0
    mean10 = float(np.mean(last10))
    if mean10 < MEAN_EPSILON:
        return 0.0
    sd10 = float(np.std(last10, ddof=0))
    monotony10 = mean10 / sd10 if sd10 > STD_EPSILON else 0.0
    return mean10 * monotony10


def compute_load_metrics(series: Sequence[LoadPoint]) -> LoadMetrics:
    """Compute every derived metric from a completed load series.

    Args:
        series: Load points, oldest first. May be empty.

    Returns:
        LoadMetrics with neutral values for an empty series.
    """
    if not series:
        return LoadMetrics(
            acwr=NEUTRAL_RATIO, monotony=0.0, ramp_rate=0.0, spike10=NEUTRAL_RATIO, strain10=0.0
        )
    latest = series[-1]
    loads = [p.load for p in series]
    return LoadMetrics(
        acwr=calculate_acwr(latest.acute, latest.chronic),
        monotony=calculate_monotony(loads),
        ramp_rate=calculate_ramp_rate([p.chronic for p in series]),
        spike10=calculate_spike_ratio(loads),
        strain10=calculate_strain(loads),
    )
