"""JSON serialization for LoadSnapshot objects.

Produces plain dicts (ISO dates, floats) suitable for an API response or
for persisting a series. A series read back with ``series_from_dicts`` can
be re-audited with ``compute_load_metrics`` without re-running the filters.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any, Iterable

from load_engine.models.load import LoadPoint, LoadSnapshot

# Decimal places for values forwarded to a plan generator
_CONTEXT_PRECISION = 2


def point_to_dict(point: LoadPoint) -> dict[str, Any]:
    return {
        "date": point.date.isoformat(),
        "load": point.load,
        "chronic": point.chronic,
        "acute": point.acute,
        "balance": point.balance,
    }


def snapshot_to_dict(snapshot: LoadSnapshot, source: str | None = None) -> dict[str, Any]:
    """Convert a LoadSnapshot to a JSON-compatible dict.

    *source* (e.g. "live" or "demo") is included when given.
    """
    result: dict[str, Any] = {}
    if source is not None:
        result["source"] = source
    result.update({
        "date": snapshot.date.isoformat(),
        "chronic": snapshot.chronic,
        "acute": snapshot.acute,
        "balance": snapshot.balance,
        "recent_volume_min": snapshot.recent_volume_min,
        "acwr": snapshot.acwr,
        "monotony": snapshot.monotony,
        "ramp_rate": snapshot.ramp_rate,
        "spike10": snapshot.spike10,
        "strain10": snapshot.strain10,
        "series": [point_to_dict(p) for p in snapshot.series],
    })
    return result


def snapshot_to_json(
    snapshot: LoadSnapshot, source: str | None = None, indent: int = 2
) -> str:
    """Convert a LoadSnapshot to a JSON string."""
    return json.dumps(snapshot_to_dict(snapshot, source), indent=indent)


def series_from_dicts(items: Iterable[dict[str, Any]]) -> tuple[LoadPoint, ...]:
    """Rebuild load points from dicts produced by ``point_to_dict``.

    Balance is taken as stored, not recomputed.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If a date or number cannot be parsed.
    """
    return tuple(
        LoadPoint(
            date=date.fromisoformat(item["date"]),
            load=float(item["load"]),
            chronic=float(item["chronic"]),
            acute=float(item["acute"]),
            balance=float(item["balance"]),
        )
        for item in items
    )


def plan_request_context(snapshot: LoadSnapshot) -> dict[str, float]:
    """Scalar physiological context forwarded to a workout-plan generator."""
    fields = {
        "balance": snapshot.balance,
        "chronic": snapshot.chronic,
        "acute": snapshot.acute,
        "recent_volume_min": snapshot.recent_volume_min,
        "acwr": snapshot.acwr,
        "monotony": snapshot.monotony,
        "ramp_rate": snapshot.ramp_rate,
        "spike10": snapshot.spike10,
        "strain10": snapshot.strain10,
    }
    return {key: round(value, _CONTEXT_PRECISION) for key, value in fields.items()}
