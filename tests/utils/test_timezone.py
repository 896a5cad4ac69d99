# tests/utils/test_timezone.py
from datetime import datetime, timedelta, timezone

from ecole_maritime.utils.timezone import (
    as_utc,
    convert_utc_to_local,
    normalize_session_bounds,
    to_utc_preserving_time,
    utc_now,
)


def test_offset_round_trip_keeps_wall_clock():
    saisie = datetime(2025, 3, 10, 9, 0)

    stored = to_utc_preserving_time(saisie, offset_hours=1)

    assert stored == datetime(2025, 3, 10, 10, 0)
    assert convert_utc_to_local(stored, offset_hours=1) == saisie


def test_local_time_is_wall_clock_for_aware_values():
    stored = datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)

    local = convert_utc_to_local(stored, offset_hours=1)

    assert local == datetime(2025, 3, 10, 8, 0)
    assert local.tzinfo is None


def test_normalize_session_bounds_keeps_the_day():
    debut, fin = normalize_session_bounds(
        datetime(2025, 3, 10, 23, 30, tzinfo=timezone.utc),
        datetime(2025, 3, 12, 0, 15),
    )

    assert debut == datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
    assert fin == datetime(2025, 3, 12, 18, 0, tzinfo=timezone.utc)


def test_as_utc():
    aware = datetime(2025, 3, 10, 10, 0, tzinfo=timezone(timedelta(hours=1)))

    assert as_utc(aware) == datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
    assert as_utc(datetime(2025, 3, 10)).tzinfo == timezone.utc


def test_utc_now_is_aware():
    assert utc_now().tzinfo == timezone.utc
