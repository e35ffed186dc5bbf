"""Exception hierarchy for the load engine.

Numeric edge cases never raise; only invalid caller input does.
"""

from __future__ import annotations


class LoadEngineError(Exception):
    """Base exception for all load_engine errors."""


class InvalidWindowError(LoadEngineError, ValueError):
    """The requested window is empty (``days < 1``)."""

    def __init__(self, days: int) -> None:
        super().__init__(f"days must be >= 1, got {days}")
        self.days = days


class InvalidSettingsError(LoadEngineError, ValueError):
    """A LoadSettings field is out of range."""
