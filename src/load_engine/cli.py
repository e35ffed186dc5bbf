"""Command-line entry point: print a training-load snapshot as JSON.

Usage:
    python -m load_engine.cli --demo --days 45
    python -m load_engine.cli --input activities.json --format strava
    python -m load_engine.cli --demo --context    # plan-request fields only
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from datetime import date

from load_engine.config import (
    MAX_HR,
    RESTING_HR,
    WINDOW_DAYS,
    clamp_days,
    clamp_max_hr,
    clamp_resting_hr,
    settings_from_env,
)
from load_engine.engine import LoadEngine
from load_engine.serialization import plan_request_context, snapshot_to_dict
from load_engine.sources import (
    map_garmin_activities,
    map_session_records,
    map_strava_activities,
    select_activities,
)

logger = logging.getLogger(__name__)

_MAPPERS = {
    "strava": map_strava_activities,
    "garmin": map_garmin_activities,
    "sessions": map_session_records,
}


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Training load snapshot (CTL/ATL/TSB)")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", help="JSON file with a list of activities")
    source.add_argument("--demo", action="store_true", help="Use generated demo activities")
    parser.add_argument("--format", choices=sorted(_MAPPERS), default="sessions")
    parser.add_argument("--days", type=int, default=WINDOW_DAYS)
    parser.add_argument("--end-date", type=_parse_date, default=None)
    parser.add_argument("--max-hr", type=int, default=MAX_HR)
    parser.add_argument("--resting-hr", type=int, default=RESTING_HR)
    parser.add_argument("--context", action="store_true", help="Print plan-request context only")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    days = clamp_days(args.days)
    end_date = args.end_date or date.today()
    settings = dataclasses.replace(
        settings_from_env(),
        max_hr=clamp_max_hr(args.max_hr),
        resting_hr=clamp_resting_hr(args.resting_hr),
    )

    fetch = None
    if args.input:
        try:
            with open(args.input) as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Failed to read %s: %s", args.input, exc)
            return 1
        loaded = _MAPPERS[args.format](raw)
        if not loaded:
            logger.error("No usable activities in %s (format=%s)", args.input, args.format)
            return 1

        def fetch(_days: int) -> list:
            return loaded

    source, sessions = select_activities(fetch, days, end_date)
    snapshot = LoadEngine(settings).build_snapshot(sessions, days=days, end_date=end_date)
    logger.info(
        "Snapshot for %s (%s data): TSB=%.1f ACWR=%.2f",
        snapshot.date.isoformat(),
        source,
        snapshot.balance,
        snapshot.acwr,
    )

    payload = plan_request_context(snapshot) if args.context else snapshot_to_dict(snapshot, source)
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
