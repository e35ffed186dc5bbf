"""Shared test fixtures: settings, engine, anchor dates and session lists."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from load_engine.engine import LoadEngine
from load_engine.models.session import Session
from load_engine.models.settings import LoadSettings
from load_engine.sources.demo import generate_demo_activities


@pytest.fixture
def anchor_date() -> date:
    """Fixed anchor so weekday-dependent demo data is reproducible."""
    return date(2025, 6, 20)


@pytest.fixture
def default_settings() -> LoadSettings:
    """Max HR 190, resting HR 50, 7-day seed, 7/42-day time constants."""
    return LoadSettings()


@pytest.fixture
def engine(default_settings: LoadSettings) -> LoadEngine:
    return LoadEngine(default_settings)


@pytest.fixture
def demo_sessions(anchor_date: date) -> list[Session]:
    """45 days of regular moderate training including a peak build week."""
    return generate_demo_activities(days=45, end_date=anchor_date)


@pytest.fixture
def daily_30min_sessions(anchor_date: date) -> list[Session]:
    """14 consecutive days of 30 min at 140 bpm, ending on the anchor date."""
    return [
        Session(date=anchor_date - timedelta(days=offset), duration_min=30.0, avg_hr=140)
        for offset in range(14)
    ]


@pytest.fixture
def steady_loads() -> list[float]:
    """28 days of identical daily load."""
    return [50.0] * 28


@pytest.fixture
def ramp_loads() -> list[float]:
    """10, 20, ..., 70: mean 40, population std 20."""
    return [10.0, 20.0, 30.0, 40.0, 50.0, 60.0, 70.0]
