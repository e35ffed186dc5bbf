"""Data models for the load engine."""

from load_engine.models.enums import HRZone
from load_engine.models.load import LoadMetrics, LoadPoint, LoadSnapshot
from load_engine.models.session import Session
from load_engine.models.settings import LoadSettings

__all__ = [
    "HRZone",
    "LoadMetrics",
    "LoadPoint",
    "LoadSettings",
    "LoadSnapshot",
    "Session",
]
