"""LoadEngine: turns a list of sessions into a daily training-load snapshot."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from load_engine.exceptions import InvalidWindowError
from load_engine.math.load_metrics import calculate_recent_volume, compute_load_metrics
from load_engine.math.training_load import (
    aggregate_daily_loads,
    build_load_series,
    daily_load_series,
    window_start,
)
from load_engine.models.enums import DEFAULT_WINDOW_DAYS
from load_engine.models.load import LoadSnapshot
from load_engine.models.session import Session
from load_engine.models.settings import LoadSettings

logger = logging.getLogger(__name__)


class LoadEngine:
    """Scores sessions, runs the acute/chronic filters and assembles a snapshot.

    The engine holds only its immutable settings, so one instance can serve
    any number of concurrent callers.

    Usage:
        engine = LoadEngine(LoadSettings(max_hr=185, resting_hr=48))
        snapshot = engine.build_snapshot(sessions, days=45, end_date=today)
    """

    def __init__(self, settings: LoadSettings | None = None) -> None:
        self.settings = settings or LoadSettings()

    def build_snapshot(
        self,
        sessions: Sequence[Session],
        days: int = DEFAULT_WINDOW_DAYS,
        end_date: date | None = None,
    ) -> LoadSnapshot:
        """Compute the full load profile for the window ending on *end_date*.

        Args:
            sessions: Materialized session list; not mutated.
            days: Window length in days, >= 1. Callers clamp any upper bound.
            end_date: Anchor (last) day of the window. Defaults to today.

        Returns:
            A LoadSnapshot with exactly *days* series points.

        Raises:
            InvalidWindowError: If ``days < 1``.
        """
        if days < 1:
            raise InvalidWindowError(days)
        if end_date is None:
            end_date = date.today()

        sessions = tuple(sessions)
        settings = self.settings
        start_date = window_start(end_date, days)

        by_date = aggregate_daily_loads(
            sessions, start_date, end_date, settings.max_hr, settings.resting_hr
        )
        series = build_load_series(
            daily_load_series(by_date, start_date, days),
            acute_time_constant_days=settings.acute_time_constant_days,
            chronic_time_constant_days=settings.chronic_time_constant_days,
            seed_days=settings.seed_days,
        )
        metrics = compute_load_metrics(series)
        latest = series[-1]

        logger.debug(
            "Built load snapshot %s..%s from %d sessions: CTL=%.1f ATL=%.1f TSB=%.1f",
            start_date.isoformat(),
            end_date.isoformat(),
            len(sessions),
            latest.chronic,
            latest.acute,
            latest.balance,
        )

        return LoadSnapshot(
            date=latest.date,
            chronic=latest.chronic,
            acute=latest.acute,
            balance=latest.balance,
            recent_volume_min=calculate_recent_volume(sessions, end_date),
            acwr=metrics.acwr,
            monotony=metrics.monotony,
            ramp_rate=metrics.ramp_rate,
            spike10=metrics.spike10,
            strain10=metrics.strain10,
            series=series,
        )


def build_snapshot(
    sessions: Sequence[Session],
    days: int = DEFAULT_WINDOW_DAYS,
    end_date: date | None = None,
    settings: LoadSettings | None = None,
) -> LoadSnapshot:
    """Functional shortcut for ``LoadEngine(settings).build_snapshot(...)``."""
    return LoadEngine(settings).build_snapshot(sessions, days=days, end_date=end_date)
