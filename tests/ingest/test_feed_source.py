"""Tests for locating table files in feed directories and archives."""

import pytest

from gtfs_store.common.errors import FeedSourceError
from gtfs_store.ingest.feed_source import candidate_filenames, open_feed_source


def test_candidate_filenames_prefer_txt():
    assert candidate_filenames("stops", "stops.txt") == ["stops.txt", "stops.csv"]
    assert candidate_filenames("board_alights", "board_alight.txt") == [
        "board_alight.txt",
        "board_alights.txt",
        "board_alight.csv",
        "board_alights.csv",
    ]


def test_csv_fallback(write_feed):
    path = write_feed({"stops.csv": "stop_id\nS1\n", "routes.txt": "route_id,route_type\nA1,3\n"})

    with open_feed_source(str(path)) as source:
        assert source.find("stops", "stops.txt") == "stops.csv"
        assert source.find("routes", "routes.txt") == "routes.txt"
        assert source.find("shapes", "shapes.txt") is None

        df, skipped = source.read_table("stops.csv", "stops")
        assert df["stop_id"].tolist() == ["S1"]
        assert skipped == []


def test_zip_with_single_folder(write_zip):
    path = write_zip({"agency.txt": "agency_name\nX\n"}, folder="feed/")

    with open_feed_source(str(path)) as source:
        assert source.filenames == ["agency.txt"]


def test_lines_with_extra_fields_are_reported(write_feed):
    path = write_feed({"routes.txt": "route_id,route_type\nA1,3\nB2,3,extra,fields\nC3,0\n"})

    with open_feed_source(str(path)) as source:
        df, skipped = source.read_table("routes.txt", "routes")

    assert df["route_id"].tolist() == ["A1", "C3"]
    assert [w.line for w in skipped] == [3]


def test_invalid_archive(tmp_path):
    path = tmp_path / "broken.zip"
    path.write_bytes(b"not a zip")

    with pytest.raises(FeedSourceError):
        with open_feed_source(str(path)):
            pass
