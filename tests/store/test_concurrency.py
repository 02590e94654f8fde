"""Tests for reads, imports and exports issued from several threads."""

import threading

import pytest

from gtfs_store.export.export_writer import export_agency
from gtfs_store.ingest.feed_loader import import_feed
from gtfs_store.query.queries import get_routes
from gtfs_store.store.database import GTFSStore

WAIT = 5.0
BLOCKED = 0.3


def _start(target, *args, **kwargs):
    """Run target in a daemon thread; the outcome dict receives its result or exception."""
    outcome = {}

    def runner():
        try:
            outcome["result"] = target(*args, **kwargs)
        except Exception as exc:
            outcome["error"] = exc

    thread = threading.Thread(target=runner, daemon=True)
    thread.start()
    return thread, outcome


def _hold_write(store, agency_key, inserted, release):
    """Insert two routes for agency_key and keep the transaction open until released."""
    with store.transaction(agency_key) as conn:
        store.bulk_insert(conn, "routes", [
            {"agency_key": agency_key, "route_id": "N1", "route_type": 3},
            {"agency_key": agency_key, "route_id": "N2", "route_type": 3},
        ])
        inserted.set()
        release.wait(WAIT)


@pytest.fixture
def file_store(tmp_path):
    gtfs_store = GTFSStore(str(tmp_path / "gtfs.db")).open()
    yield gtfs_store
    gtfs_store.close()


def test_file_store_reads_run_during_an_open_import(file_store, feed_dir):
    """Readers of a file store are not blocked by a writer and never see its uncommitted rows."""
    import_feed(str(feed_dir), agency_key="base", store=file_store)
    inserted, release = threading.Event(), threading.Event()
    writer, outcome = _start(_hold_write, file_store, "other", inserted, release)

    try:
        assert inserted.wait(WAIT)
        assert len(get_routes(where={"agency_key": "base"}, store=file_store)) == 3
        assert get_routes(where={"agency_key": "other"}, store=file_store) == []
        assert writer.is_alive(), "the read finished while the write transaction was still open"
    finally:
        release.set()
        writer.join(WAIT)

    assert "error" not in outcome
    assert len(get_routes(where={"agency_key": "other"}, store=file_store)) == 2


def test_memory_store_reads_wait_for_the_open_import(store, feed_dir):
    """The shared in-memory connection makes readers wait, then see the whole committed import."""
    import_feed(str(feed_dir), agency_key="base", store=store)
    inserted, release = threading.Event(), threading.Event()
    writer, _ = _start(_hold_write, store, "other", inserted, release)

    try:
        assert inserted.wait(WAIT)
        reader, read = _start(get_routes, where={"agency_key": "other"}, store=store)
        reader.join(BLOCKED)
        assert reader.is_alive(), "read should wait for the write transaction"
    finally:
        release.set()
        writer.join(WAIT)

    reader.join(WAIT)
    assert [r["route_id"] for r in read["result"]] == ["N1", "N2"]


def test_import_waits_for_export_of_the_same_agency(store, feed_dir, write_feed, feed_tables):
    import_feed(str(feed_dir), agency_key="demo", store=store)
    feed_tables["routes.txt"] = (
        "route_id,agency_id,route_short_name,route_long_name,route_type\n"
        "Z9,AG,Z9,Zulu Line,3\n"
    )
    newer = write_feed(feed_tables, name="newer")

    # export_agency holds this lock for the whole export
    with store.agency_lock("demo"):
        importer, outcome = _start(import_feed, str(newer), agency_key="demo", store=store)
        importer.join(BLOCKED)
        assert importer.is_alive(), "import of the same key should wait"
        assert len(get_routes(where={"agency_key": "demo"}, store=store)) == 3

    importer.join(WAIT)
    assert "error" not in outcome
    assert [r["route_id"] for r in get_routes(where={"agency_key": "demo"}, store=store)] == ["Z9"]


def test_export_waits_for_import_of_the_same_agency(store, feed_dir, tmp_path):
    import_feed(str(feed_dir), agency_key="demo", store=store)
    inserted, release = threading.Event(), threading.Event()
    writer, _ = _start(_hold_write, store, "demo", inserted, release)

    try:
        assert inserted.wait(WAIT)
        exporter, outcome = _start(export_agency, "demo", str(tmp_path / "out"), store=store)
        exporter.join(BLOCKED)
        assert exporter.is_alive(), "export of the same key should wait"
        assert not (tmp_path / "out" / "routes.txt").exists()
    finally:
        release.set()
        writer.join(WAIT)

    exporter.join(WAIT)
    assert outcome["result"].row_counts["routes"] == 5, "export sees the committed import"


def test_imports_of_different_agencies_are_serialized(file_store, feed_dir):
    """A second agency's import queues behind an open write and commits after it."""
    inserted, release = threading.Event(), threading.Event()
    writer, _ = _start(_hold_write, file_store, "first", inserted, release)

    try:
        assert inserted.wait(WAIT)
        importer, outcome = _start(import_feed, str(feed_dir), agency_key="second", store=file_store)
        importer.join(BLOCKED)
        assert importer.is_alive(), "a second writer should wait for the store write lock"
        assert get_routes(where={"agency_key": "second"}, store=file_store) == []
    finally:
        release.set()
        writer.join(WAIT)

    importer.join(WAIT)
    assert "error" not in outcome
    assert file_store.agency_keys() == ["first", "second"]


def test_parallel_imports_all_commit(store, feed_dir):
    threads = [
        _start(import_feed, str(feed_dir), agency_key=f"k{i}", store=store)
        for i in range(4)
    ]
    for thread, _ in threads:
        thread.join(WAIT * 2)

    assert all("error" not in outcome for _, outcome in threads)
    assert store.agency_keys() == ["k0", "k1", "k2", "k3"]
    for key in store.agency_keys():
        assert len(get_routes(where={"agency_key": key}, store=store)) == 3
