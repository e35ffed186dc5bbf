"""Activity sources: map fetched activity data to Session records."""

from load_engine.sources.activity_mapper import (
    map_garmin_activities,
    map_session_records,
    map_strava_activities,
)
from load_engine.sources.demo import generate_demo_activities
from load_engine.sources.selection import select_activities

__all__ = [
    "generate_demo_activities",
    "map_garmin_activities",
    "map_session_records",
    "map_strava_activities",
    "select_activities",
]
