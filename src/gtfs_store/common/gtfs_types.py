"""Scalar conversions between GTFS text encodings and stored values."""

import re
from datetime import date, datetime
from typing import Any, Optional

import pandas as pd

TIME_PATTERN = re.compile(r"^(\d{1,3}):([0-5]\d):([0-5]\d)$")
DATE_FORMAT = "%Y%m%d"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def parse_gtfs_time(value: Any) -> Optional[int]:
    """Convert a GTFS time (H:MM:SS, hours may exceed 23) to seconds since service-day midnight.

    Integers are taken to already be seconds. Blank values map to None.
    """
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid GTFS time: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Invalid GTFS time: {value!r}")
        return value

    match = TIME_PATTERN.match(str(value).strip())
    if not match:
        raise ValueError(f"Invalid GTFS time: {value!r}")
    hours, minutes, seconds = (int(part) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def format_gtfs_time(seconds: Optional[int]) -> str:
    """Inverse of :func:`parse_gtfs_time`; keeps hours past 24 (e.g. 25:10:00)."""
    if _is_blank(seconds):
        return ""
    seconds = int(seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def parse_gtfs_date(value: Any) -> Optional[date]:
    """Convert a GTFS date (YYYYMMDD) to ``datetime.date``."""
    if _is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if len(text) != 8 or not text.isdigit():
        raise ValueError(f"Invalid GTFS date: {value!r}")
    return datetime.strptime(text, DATE_FORMAT).date()


def format_gtfs_date(value: Optional[date]) -> str:
    if _is_blank(value):
        return ""
    return value.strftime(DATE_FORMAT)


__all__ = [
    "TIME_PATTERN",
    "DATE_FORMAT",
    "parse_gtfs_time",
    "format_gtfs_time",
    "parse_gtfs_date",
    "format_gtfs_date",
]
