"""Pure functions mapping raw activity dicts to Session records.

No I/O: takes already-fetched activity lists (Strava API, Garmin Connect,
or plain JSON records) and returns Sessions. Records that cannot be parsed
are skipped, never raised.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timezone
from typing import Any, Optional

from load_engine.models.session import Session

logger = logging.getLogger(__name__)

# Activity types that carry a meaningful heart-rate load. The score is
# HR-based, so mixed sports normalise through the same formula.
CARDIO_ACTIVITY_TYPES = frozenset({
    "run", "trailrun", "virtualrun",
    "ride", "virtualride", "ebikeride",
    "hike", "walk",
    "swim", "openwatersports",
    "nordicski", "rowing",
})


def map_strava_activities(raw: Any) -> list[Session]:
    """Map a Strava ``/athlete/activities`` response to Sessions.

    Uses the UTC calendar date of ``start_date``, ``elapsed_time`` (seconds)
    as duration and ``average_heartrate``. Non-cardio types are dropped.
    """
    sessions: list[Session] = []
    for act in _as_list(raw):
        if not _is_cardio(act):
            continue
        session_date = _parse_utc_date(act.get("start_date"))
        duration_min = _seconds_to_minutes(act.get("elapsed_time"))
        if session_date is None or duration_min is None:
            logger.debug("Skipping unparseable Strava activity %s", act.get("id"))
            continue
        sessions.append(
            Session(
                date=session_date,
                duration_min=duration_min,
                avg_hr=_to_int(act.get("average_heartrate")),
            )
        )
    return sessions


def map_garmin_activities(raw: Any) -> list[Session]:
    """Map a Garmin Connect activity list to Sessions.

    Path: startTimeLocal ("YYYY-MM-DD HH:MM:SS"), duration (seconds),
    averageHR. Garmin activity lists are not filtered by type.
    """
    sessions: list[Session] = []
    for act in _as_list(raw):
        session_date = _parse_local_date(act.get("startTimeLocal"))
        duration_min = _seconds_to_minutes(act.get("duration"))
        if session_date is None or duration_min is None:
            logger.debug("Skipping unparseable Garmin activity %s", act.get("activityId"))
            continue
        sessions.append(
            Session(
                date=session_date,
                duration_min=duration_min,
                avg_hr=_to_int(act.get("averageHR")),
            )
        )
    return sessions


def map_session_records(raw: Any) -> list[Session]:
    """Map plain ``{"date", "duration_min", "avg_hr"}`` records to Sessions."""
    sessions: list[Session] = []
    for rec in _as_list(raw):
        session_date = _parse_local_date(rec.get("date"))
        try:
            duration_min = _valid_duration(float(rec.get("duration_min")))
        except (TypeError, ValueError):
            duration_min = None
        if session_date is None or duration_min is None:
            logger.debug("Skipping unparseable session record %r", rec)
            continue
        sessions.append(
            Session(date=session_date, duration_min=duration_min, avg_hr=_to_int(rec.get("avg_hr")))
        )
    return sessions


# ---------------------------------------------------------------------------
# Internal helpers: each handles None input gracefully
# ---------------------------------------------------------------------------


def _is_cardio(act: dict) -> bool:
    """Either the legacy ``type`` or the detailed ``sport_type`` must be cardio.

    Detailed types such as MountainBikeRide or GravelRide keep ``type`` = Ride.
    """
    for key in ("type", "sport_type"):
        if str(act.get(key) or "").lower() in CARDIO_ACTIVITY_TYPES:
            return True
    return False


def _as_list(raw: Any) -> list[dict]:
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning("Expected a list of activities, got %s", type(raw).__name__)
        return []
    return [item for item in raw if isinstance(item, dict)]


def _parse_utc_date(value: Any) -> Optional[date]:
    """Calendar date in UTC of an ISO-8601 timestamp such as ``2025-06-15T06:30:00Z``."""
    if not isinstance(value, str) or not value:
        return None
    try:
        ts = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if ts.tzinfo is None:
        return ts.date()
    return ts.astimezone(timezone.utc).date()


def _parse_local_date(value: Any) -> Optional[date]:
    """Date part of ``YYYY-MM-DD`` or ``YYYY-MM-DD HH:MM:SS`` strings."""
    if isinstance(value, date):
        return value if not isinstance(value, datetime) else value.date()
    if not isinstance(value, str) or len(value) < 10:
        return None
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def _seconds_to_minutes(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return _valid_duration(float(value) / 60.0)
    except (TypeError, ValueError):
        return None


def _valid_duration(minutes: float) -> Optional[float]:
    """Reject NaN, infinite and negative durations."""
    if not math.isfinite(minutes) or minutes < 0:
        return None
    return minutes


def _to_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None
