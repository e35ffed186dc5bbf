"""Load series models: per-day points, derived metrics and the snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class LoadPoint:
    """Filter state after one calendar day's update.

    ``balance`` is always ``chronic - acute`` (TSB = CTL - ATL); it is set
    once at construction and never recomputed.
    """

    date: date
    load: float  # raw daily load (sum of session scores)
    chronic: float  # CTL
    acute: float  # ATL
    balance: float  # TSB


@dataclass(frozen=True)
class LoadMetrics:
    """Post-hoc reductions over a completed load series."""

    acwr: float
    monotony: float
    ramp_rate: float
    spike10: float
    strain10: float


@dataclass(frozen=True)
class LoadSnapshot:
    """Immutable result of one engine call.

    Scalar fields mirror the last point of ``series``; ``series`` covers the
    whole requested window, oldest first.
    """

    date: date
    chronic: float
    acute: float
    balance: float
    recent_volume_min: float
    acwr: float
    monotony: float
    ramp_rate: float
    spike10: float
    strain10: float
    series: tuple[LoadPoint, ...] = field(default_factory=tuple)

    @property
    def metrics(self) -> LoadMetrics:
        """The derived metrics as a standalone value."""
        return LoadMetrics(
            acwr=self.acwr,
            monotony=self.monotony,
            ramp_rate=self.ramp_rate,
            spike10=self.spike10,
            strain10=self.strain10,
        )
