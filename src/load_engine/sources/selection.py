"""Choose between live activities and demo data."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date

from load_engine.models.session import Session
from load_engine.sources.demo import generate_demo_activities

logger = logging.getLogger(__name__)

SOURCE_LIVE = "live"
SOURCE_DEMO = "demo"

ActivityFetcher = Callable[[int], Sequence[Session]]


def select_activities(
    fetch: ActivityFetcher | None,
    days: int,
    end_date: date | None = None,
) -> tuple[str, list[Session]]:
    """Fetch live sessions, falling back to demo data.

    A missing fetcher, a failing fetch and an empty result all count as
    "no data"; the failure is logged, not raised.

    Returns:
        ``(source, sessions)`` where source is ``"live"`` or ``"demo"``.
    """
    if fetch is None:
        return SOURCE_DEMO, generate_demo_activities(days, end_date)

    try:
        sessions = list(fetch(days))
    except Exception as exc:
        logger.warning("Activity fetch failed, using demo data: %s", exc)
        return SOURCE_DEMO, generate_demo_activities(days, end_date)

    if not sessions:
        logger.info("No activities in the last %d days, using demo data", days)
        return SOURCE_DEMO, generate_demo_activities(days, end_date)
    return SOURCE_LIVE, sessions
