from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from classroom_admin.core.timestamps import format_date, format_timestamp, to_instant

EPOCH_2024 = 1709649015  # 2024-03-05 14:30:15 UTC


def test_aware_datetime_is_unchanged():
    value = datetime(2024, 3, 5, 14, 30, 15, tzinfo=timezone.utc)
    assert to_instant(value) is value


def test_naive_datetime_is_treated_as_utc():
    assert to_instant(datetime(2024, 3, 5, 14, 30, 15)) == datetime(2024, 3, 5, 14, 30, 15, tzinfo=timezone.utc)


def test_firestore_like_shapes():
    expected = datetime(2024, 3, 5, 14, 30, 15, tzinfo=timezone.utc)
    assert to_instant({"seconds": EPOCH_2024, "nanoseconds": 0}) == expected
    assert to_instant(SimpleNamespace(seconds=EPOCH_2024, nanoseconds=500_000_000)) == expected + timedelta(milliseconds=500)
    assert to_instant(EPOCH_2024) == expected


def test_unknown_shapes_are_none():
    assert to_instant(None) is None
    assert to_instant("yesterday") is None
    assert to_instant({"when": 1}) is None
    assert to_instant(True) is None


def test_format_timestamp_twelve_hour_clock():
    assert format_timestamp(datetime(2024, 3, 5, 0, 5, 9, tzinfo=timezone.utc), timezone.utc) == "3/5/2024, 12:05:09 AM"
    assert format_timestamp(datetime(2024, 12, 25, 12, 0, 0, tzinfo=timezone.utc), timezone.utc) == "12/25/2024, 12:00:00 PM"


def test_format_timestamp_converts_zone():
    ist = timezone(timedelta(hours=5, minutes=30))
    value = datetime(2024, 3, 5, 20, 0, 0, tzinfo=timezone.utc)
    assert format_timestamp(value, ist) == "3/6/2024, 1:30:00 AM"


def test_format_date():
    assert format_date(datetime(2024, 3, 5, tzinfo=timezone.utc)) == "3/5/2024"
