"""Tests for GTFS time and date conversions."""

from datetime import date

import pytest

from gtfs_store.common.gtfs_types import (
    format_gtfs_date,
    format_gtfs_time,
    parse_gtfs_date,
    parse_gtfs_time,
)


def test_parse_time_keeps_rollover_hours():
    """Times past midnight of the service day are not wrapped."""
    assert parse_gtfs_time("25:10:00") == 90600, "25:10:00 should be 90600 seconds"
    assert parse_gtfs_time("08:00:00") == 28800
    assert parse_gtfs_time("9:05:00") == 32700, "single-digit hours are valid"


def test_parse_time_blank_and_invalid():
    assert parse_gtfs_time("") is None
    assert parse_gtfs_time(None) is None
    for bad in ("8:00", "08:61:00", "ab:cd:ef", "-1:00:00"):
        with pytest.raises(ValueError):
            parse_gtfs_time(bad)


def test_parse_time_accepts_seconds():
    assert parse_gtfs_time(3600) == 3600
    with pytest.raises(ValueError):
        parse_gtfs_time(-5)
    with pytest.raises(ValueError):
        parse_gtfs_time(True)


def test_format_time_is_inverse_of_parse():
    """Formatting pads to HH:MM:SS and keeps hours beyond 24."""
    assert format_gtfs_time(90600) == "25:10:00"
    assert format_gtfs_time(32700) == "09:05:00"
    assert format_gtfs_time(None) == ""


def test_parse_and_format_dates():
    assert parse_gtfs_date("20241225") == date(2024, 12, 25)
    assert parse_gtfs_date(date(2024, 1, 1)) == date(2024, 1, 1)
    assert parse_gtfs_date("") is None
    assert format_gtfs_date(date(2024, 3, 9)) == "20240309"
    assert format_gtfs_date(None) == ""


@pytest.mark.parametrize("bad", ["2024-12-25", "2024122", "20241332", "abcdefgh"])
def test_parse_date_rejects_malformed(bad):
    with pytest.raises(ValueError):
        parse_gtfs_date(bad)
