# tests/conftest.py
"""Shared fixtures: a small GTFS feed written under tmp_path and in-memory stores."""

import zipfile
from pathlib import Path
from typing import Callable, Dict

import pytest

from gtfs_store.store.database import GTFSStore
from gtfs_store.store.lifecycle import close_store, is_store_open

BASE_FEED: Dict[str, str] = {
    "agency.txt": (
        "agency_id,agency_name,agency_url,agency_timezone\n"
        "AG,Test Transit,https://example.com,Europe/Lisbon\n"
    ),
    "stops.txt": (
        "stop_id,stop_name,stop_lat,stop_lon,location_type,parent_station\n"
        "S1,Alpha,41.15,-8.61,0,\n"
        "S2,Bravo,41.16,-8.62,0,\n"
        "S3,Charlie,41.17,-8.63,0,\n"
        "S4,Delta,41.18,-8.64,0,\n"
        "S5,Echo Station,,,1,\n"
    ),
    "routes.txt": (
        "route_id,agency_id,route_short_name,route_long_name,route_type\n"
        "A1,AG,A1,Alpha Line,3\n"
        "B2,AG,B2,Bravo Line,3\n"
        "C3,AG,C3,Charlie Line,0\n"
    ),
    "trips.txt": (
        "route_id,service_id,trip_id,trip_headsign,direction_id,shape_id\n"
        "A1,WK,T1,Delta,0,SH1\n"
        "A1,WK,T2,Alpha,1,SH1\n"
        "B2,WE,T3,Charlie,0,SH2\n"
    ),
    "stop_times.txt": (
        "trip_id,arrival_time,departure_time,stop_id,stop_sequence\n"
        "T1,08:00:00,08:00:00,S1,1\n"
        "T1,08:10:00,08:11:00,S2,2\n"
        "T1,08:20:00,08:20:00,S4,3\n"
        "T2,25:10:00,25:10:00,S4,1\n"
        "T2,25:30:00,25:31:00,S1,2\n"
        "T3,9:05:00,9:05:00,S3,1\n"
        "T3,09:15:00,09:15:00,S2,2\n"
    ),
    "calendar.txt": (
        "service_id,monday,tuesday,wednesday,thursday,friday,saturday,sunday,start_date,end_date\n"
        "WK,1,1,1,1,1,0,0,20240101,20241231\n"
        "WE,0,0,0,0,0,1,1,20240101,20241231\n"
    ),
    "calendar_dates.txt": (
        "service_id,date,exception_type\n"
        "WK,20241225,2\n"
    ),
    "shapes.txt": (
        "shape_id,shape_pt_lat,shape_pt_lon,shape_pt_sequence\n"
        "SH1,41.15,-8.61,1\n"
        "SH1,41.16,-8.62,2\n"
        "SH1,41.18,-8.64,3\n"
        "SH2,41.17,-8.63,1\n"
        "SH2,95.0,-8.62,2\n"
    ),
}


@pytest.fixture
def feed_tables() -> Dict[str, str]:
    """A fresh copy of the base feed, file name -> CSV text."""
    return dict(BASE_FEED)


@pytest.fixture
def write_feed(tmp_path: Path) -> Callable[..., Path]:
    """Write a feed directory under tmp_path and return its path."""

    def _write(tables: Dict[str, str], name: str = "demo") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for filename, content in tables.items():
            (root / filename).write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def write_zip(tmp_path: Path) -> Callable[..., Path]:
    """Write a feed archive under tmp_path, optionally nesting members in a folder."""

    def _write(tables: Dict[str, str], name: str = "demo.zip", folder: str = "") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as archive:
            for filename, content in tables.items():
                archive.writestr(f"{folder}{filename}", content)
        return path

    return _write


@pytest.fixture
def feed_dir(write_feed, feed_tables) -> Path:
    return write_feed(feed_tables)


@pytest.fixture
def store():
    """An open in-memory store, closed after the test."""
    gtfs_store = GTFSStore().open()
    yield gtfs_store
    gtfs_store.close()


@pytest.fixture(autouse=True)
def reset_default_store():
    """Make sure no test leaks an open default store into the next one."""
    yield
    if is_store_open():
        close_store()
