"""Tests for the get_* query functions."""

from datetime import date

import pytest

from gtfs_store.common.errors import NotOpenError, UnknownFieldError, UnknownTableError
from gtfs_store.ingest.feed_loader import import_feed
from gtfs_store.query import queries
from gtfs_store.query.queries import (
    QUERY_FUNCTIONS,
    get_calendar_dates,
    get_calendars,
    get_fare_rules,
    get_routes,
    get_stops,
    get_timetables,
    get_trips,
    query_table,
)
from gtfs_store.schemas.schema_registry import all_tables
from gtfs_store.store.lifecycle import open_store


@pytest.fixture
def loaded(store, feed_dir):
    import_feed(str(feed_dir), store=store)
    return store


def test_every_table_has_a_query_function():
    assert sorted(QUERY_FUNCTIONS) == sorted(all_tables())
    assert queries.get_timetable_stop_orders.table == "timetable_stop_order"
    assert queries.get_ride_feed_infos.table == "ride_feed_info"


def test_where_single_route(loaded):
    rows = get_routes(where={"route_id": "A1"}, store=loaded)
    assert len(rows) == 1
    assert rows[0]["route_long_name"] == "Alpha Line"
    assert rows[0]["agency_key"] == "demo"


def test_projection_returns_only_requested_fields(loaded):
    rows = get_stops(fields=["stop_id"], store=loaded)
    assert rows == [{"stop_id": s} for s in ("S1", "S2", "S3", "S4", "S5")]


def test_in_and_null_filters(loaded):
    trips = get_trips(where={"route_id": ["A1", "B2"], "direction_id": 0}, order_by=[("trip_id", "DESC")], store=loaded)
    assert [t["trip_id"] for t in trips] == ["T3", "T1"]

    stations = get_stops(where={"stop_lat": None}, fields=["stop_id"], store=loaded)
    assert stations == [{"stop_id": "S5"}]


def test_dates_come_back_as_dates(loaded):
    calendar = get_calendars(where={"service_id": "WK"}, store=loaded)[0]
    assert calendar["start_date"] == date(2024, 1, 1)
    assert calendar["monday"] == 1

    exceptions = get_calendar_dates(where={"date": "20241225"}, store=loaded)
    assert [e["service_id"] for e in exceptions] == ["WK"]


def test_unpopulated_tables_are_empty(loaded):
    assert get_fare_rules(store=loaded) == []
    assert get_timetables(store=loaded) == []


def test_unknown_field_gives_no_partial_results(loaded):
    with pytest.raises(UnknownFieldError) as excinfo:
        get_routes(where={"route_id": "A1", "colour": "red"}, store=loaded)
    assert excinfo.value.field == "colour"

    with pytest.raises(UnknownTableError):
        query_table("buses", store=loaded)


def test_default_store_is_used(feed_dir):
    with pytest.raises(NotOpenError):
        get_routes()

    open_store()
    import_feed(str(feed_dir))
    assert len(get_routes()) == 3
