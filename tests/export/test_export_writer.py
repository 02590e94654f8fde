"""Tests for exporting agency datasets to GTFS files."""

import pytest

from gtfs_store.common.errors import ExportError
from gtfs_store.export.export_writer import export_agency, export_gtfs
from gtfs_store.ingest.feed_loader import import_feed, import_gtfs
from gtfs_store.query.queries import query_table
from gtfs_store.schemas.schema_registry import all_tables, describe
from gtfs_store.store.lifecycle import get_store


def _content(store, table, agency_key):
    rows = query_table(table, where={"agency_key": agency_key}, store=store)
    for row in rows:
        row.pop("agency_key")
    return sorted(rows, key=repr)


def test_round_trip_preserves_every_table(store, feed_dir, tmp_path):
    """import -> export -> import gives the same rows for every table."""
    import_feed(str(feed_dir), agency_key="first", store=store)
    export_agency("first", str(tmp_path / "out"), store=store)
    import_feed(str(tmp_path / "out"), agency_key="copy", store=store)

    for table in all_tables():
        assert _content(store, table, "copy") == _content(store, table, "first"), f"{table} differs after round trip"


def test_export_writes_header_and_formats(store, feed_dir, tmp_path):
    import_feed(str(feed_dir), store=store)
    summary = export_agency("demo", str(tmp_path / "out"), store=store)

    assert summary.row_counts["stop_times"] == 7
    assert "fare_rules" not in summary.row_counts, "empty tables are not written"
    assert not (tmp_path / "out" / "fare_rules.txt").exists()

    lines = (tmp_path / "out" / "stop_times.txt").read_text().splitlines()
    assert lines[0].split(",") == [c.name for c in describe("stop_times")]
    assert any(line.startswith("T2,25:10:00,25:10:00,S4,1") for line in lines), "rollover times are kept"
    assert any(line.startswith("T3,09:05:00,") for line in lines)

    calendar = (tmp_path / "out" / "calendar.txt").read_text()
    assert "20240101,20241231" in calendar


def test_unknown_agency(store, tmp_path):
    with pytest.raises(ExportError):
        export_agency("ghost", str(tmp_path / "out"), store=store)


def test_unwritable_destination(store, feed_dir, tmp_path):
    import_feed(str(feed_dir), store=store)
    blocker = tmp_path / "file"
    blocker.write_text("occupied")

    with pytest.raises(ExportError):
        export_agency("demo", str(blocker / "out"), store=store)


def test_export_gtfs_uses_export_path(feed_dir, tmp_path):
    config = {
        "exportPath": str(tmp_path / "exports"),
        "verbose": False,
        "agencies": [{"path": str(feed_dir), "agency_key": "demo"}],
    }

    import_gtfs(config)
    summaries = export_gtfs(config, store=get_store())

    assert summaries[0].destination == str(tmp_path / "exports" / "demo")
    assert (tmp_path / "exports" / "demo" / "routes.txt").exists()
