"""Serialization module: export snapshots to JSON-compatible formats."""

from load_engine.serialization.snapshot import (
    plan_request_context,
    series_from_dicts,
    snapshot_to_dict,
    snapshot_to_json,
)

__all__ = [
    "plan_request_context",
    "series_from_dicts",
    "snapshot_to_dict",
    "snapshot_to_json",
]
