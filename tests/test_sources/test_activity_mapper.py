"""Tests for sources.activity_mapper: pure functions, no mocking needed."""

from __future__ import annotations

import math
from datetime import date

import pytest

from load_engine.engine import build_snapshot
from load_engine.sources.activity_mapper import (
    _parse_local_date,
    _parse_utc_date,
    map_garmin_activities,
    map_session_records,
    map_strava_activities,
)


@pytest.fixture
def strava_activities() -> list[dict]:
    """Trimmed Strava /athlete/activities response."""
    return [
        {
            "id": 1001,
            "type": "Run",
            "sport_type": "Run",
            "start_date": "2025-06-15T06:30:00Z",
            "elapsed_time": 3600,
            "average_heartrate": 148.7,
        },
        {
            "id": 1002,
            "type": "WeightTraining",
            "sport_type": "WeightTraining",
            "start_date": "2025-06-15T18:00:00Z",
            "elapsed_time": 2700,
            "average_heartrate": 110.0,
        },
        {
            "id": 1003,
            "type": "Ride",
            "start_date": "2025-06-16T23:30:00+02:00",
            "elapsed_time": 5400,
        },
    ]


@pytest.fixture
def garmin_activities() -> list[dict]:
    """Trimmed Garmin Connect get_activities_by_date response."""
    return [
        {
            "activityId": 555,
            "activityName": "Morning Run",
            "startTimeLocal": "2025-06-14 07:12:03",
            "duration": 2712.5,
            "averageHR": 151.0,
            "activityType": {"typeKey": "running"},
        },
        {
            "activityId": 556,
            "startTimeLocal": "2025-06-13 18:00:00",
            "duration": 1800.0,
            "activityType": {"typeKey": "strength_training"},
        },
    ]


class TestMapStravaActivities:
    def test_keeps_only_cardio_types(self, strava_activities) -> None:
        sessions = map_strava_activities(strava_activities)
        assert len(sessions) == 2

    def test_maps_fields(self, strava_activities) -> None:
        run = map_strava_activities(strava_activities)[0]
        assert run.date == date(2025, 6, 15)
        assert run.duration_min == pytest.approx(60.0)
        assert run.avg_hr == 148

    def test_missing_heart_rate_is_none(self, strava_activities) -> None:
        ride = map_strava_activities(strava_activities)[1]
        assert ride.avg_hr is None

    def test_offset_timestamp_uses_utc_date(self, strava_activities) -> None:
        ride = map_strava_activities(strava_activities)[1]
        assert ride.date == date(2025, 6, 16)

    def test_type_match_is_case_insensitive(self) -> None:
        raw = [{"type": "VIRTUALRUN", "start_date": "2025-06-15T06:30:00Z", "elapsed_time": 600}]
        assert len(map_strava_activities(raw)) == 1

    def test_detailed_sport_type_with_cardio_type_kept(self) -> None:
        raw = [
            {
                "type": "Ride",
                "sport_type": "MountainBikeRide",
                "start_date": "2025-06-15T06:30:00Z",
                "elapsed_time": 3600,
            },
            {
                "type": "Ride",
                "sport_type": "GravelRide",
                "start_date": "2025-06-16T06:30:00Z",
                "elapsed_time": 1800,
            },
        ]
        sessions = map_strava_activities(raw)
        assert [s.duration_min for s in sessions] == [60.0, 30.0]

    def test_cardio_sport_type_alone_kept(self) -> None:
        raw = [{"sport_type": "TrailRun", "start_date": "2025-06-15T06:30:00Z", "elapsed_time": 600}]
        assert len(map_strava_activities(raw)) == 1

    @pytest.mark.parametrize("elapsed", ["nan", float("inf"), -600])
    def test_invalid_elapsed_time_skipped(self, elapsed) -> None:
        raw = [{"type": "Run", "start_date": "2025-06-15T06:30:00Z", "elapsed_time": elapsed}]
        assert map_strava_activities(raw) == []

    def test_infinite_heart_rate_is_none(self) -> None:
        raw = [
            {
                "type": "Run",
                "start_date": "2025-06-15T06:30:00Z",
                "elapsed_time": 600,
                "average_heartrate": float("inf"),
            }
        ]
        assert map_strava_activities(raw)[0].avg_hr is None

    def test_unparseable_records_skipped(self) -> None:
        raw = [
            {"type": "Run", "start_date": "not a date", "elapsed_time": 600},
            {"type": "Run", "start_date": "2025-06-15T06:30:00Z"},
            "garbage",
        ]
        assert map_strava_activities(raw) == []

    def test_none_input(self) -> None:
        assert map_strava_activities(None) == []

    def test_non_list_input(self) -> None:
        assert map_strava_activities({"message": "Authorization Error"}) == []


class TestMapGarminActivities:
    def test_maps_all_activities(self, garmin_activities) -> None:
        sessions = map_garmin_activities(garmin_activities)
        assert len(sessions) == 2

    def test_maps_fields(self, garmin_activities) -> None:
        run = map_garmin_activities(garmin_activities)[0]
        assert run.date == date(2025, 6, 14)
        assert run.duration_min == pytest.approx(2712.5 / 60.0)
        assert run.avg_hr == 151

    def test_missing_heart_rate_is_none(self, garmin_activities) -> None:
        assert map_garmin_activities(garmin_activities)[1].avg_hr is None

    def test_missing_duration_skipped(self) -> None:
        assert map_garmin_activities([{"startTimeLocal": "2025-06-14 07:12:03"}]) == []

    @pytest.mark.parametrize("duration", [float("nan"), -1.0])
    def test_invalid_duration_skipped(self, duration) -> None:
        raw = [{"startTimeLocal": "2025-06-14 07:12:03", "duration": duration}]
        assert map_garmin_activities(raw) == []


class TestMapSessionRecords:
    def test_maps_plain_records(self) -> None:
        raw = [
            {"date": "2025-06-14", "duration_min": 45, "avg_hr": 140},
            {"date": "2025-06-15", "duration_min": "30.5"},
        ]
        sessions = map_session_records(raw)
        assert sessions[0].date == date(2025, 6, 14)
        assert sessions[0].duration_min == 45.0
        assert sessions[0].avg_hr == 140
        assert sessions[1].duration_min == pytest.approx(30.5)
        assert sessions[1].avg_hr is None

    def test_bad_records_skipped(self) -> None:
        raw = [{"date": "2025-06-14"}, {"duration_min": 30}, {"date": "14/06/2025", "duration_min": 30}]
        assert map_session_records(raw) == []

    @pytest.mark.parametrize("duration", ["nan", "inf", -30])
    def test_invalid_duration_skipped(self, duration, caplog) -> None:
        raw = [{"date": "2025-06-14", "duration_min": duration, "avg_hr": 140}]
        with caplog.at_level("DEBUG", logger="load_engine.sources.activity_mapper"):
            assert map_session_records(raw) == []
        assert "Skipping unparseable session record" in caplog.text

    def test_zero_duration_kept(self) -> None:
        sessions = map_session_records([{"date": "2025-06-14", "duration_min": 0}])
        assert sessions[0].duration_min == 0.0

    def test_snapshot_stays_finite_with_bad_record(self) -> None:
        raw = [
            {"date": "2025-06-19", "duration_min": "nan", "avg_hr": 150},
            {"date": "2025-06-20", "duration_min": 60, "avg_hr": 150},
        ]
        sessions = map_session_records(raw)
        snapshot = build_snapshot(sessions, days=14, end_date=date(2025, 6, 20))
        assert len(sessions) == 1
        assert snapshot.recent_volume_min == 60.0
        assert not math.isnan(snapshot.spike10)
        assert not math.isnan(snapshot.strain10)


class TestDateParsing:
    def test_utc_naive_timestamp(self) -> None:
        assert _parse_utc_date("2025-06-15T06:30:00") == date(2025, 6, 15)

    def test_utc_none(self) -> None:
        assert _parse_utc_date(None) is None

    def test_local_date_only(self) -> None:
        assert _parse_local_date("2025-06-15") == date(2025, 6, 15)

    def test_local_date_object(self) -> None:
        assert _parse_local_date(date(2025, 6, 15)) == date(2025, 6, 15)

    def test_local_garbage(self) -> None:
        assert _parse_local_date("yesterday") is None
