"""
Query Functions
===============

One ``get_<entity>`` function per stored table. Every function takes the same
filter, projection and ordering arguments:

    where:    {"route_id": "A1"}            equality
              {"route_type": [0, 3]}        IN
              {"parent_station": None}      IS NULL
    fields:   ["stop_id", "stop_name"]      projection; empty/None = all columns
    order_by: [("stop_name", "ASC"), "stop_id"]

Date columns accept ``datetime.date`` or "YYYYMMDD" literals; time columns
accept seconds or "HH:MM:SS". Time values are returned as seconds since
service-day midnight.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from gtfs_store.common.errors import UnknownTableError
from gtfs_store.schemas.schema_registry import get_schema_class
from gtfs_store.store.database import GTFSStore, OrderSpec
from gtfs_store.store.lifecycle import resolve_store

Row = Dict[str, Any]


def query_table(
    table: str,
    where: Optional[Mapping[str, Any]] = None,
    fields: Optional[Sequence[str]] = None,
    order_by: Optional[OrderSpec] = None,
    store: Optional[GTFSStore] = None,
) -> List[Row]:
    """
    Query any registered table.

    Raises:
        UnknownTableError: If the table is not registered
        UnknownFieldError: If a field in where, fields or order_by is not a column
        NotOpenError: If no store is given and none is open
    """
    if get_schema_class(table) is None:
        raise UnknownTableError(table)
    return resolve_store(store).query(table, where=where, fields=fields, order_by=order_by)


def _table_query(table: str):
    def query(
        where: Optional[Mapping[str, Any]] = None,
        fields: Optional[Sequence[str]] = None,
        order_by: Optional[OrderSpec] = None,
        store: Optional[GTFSStore] = None,
    ) -> List[Row]:
        return query_table(table, where=where, fields=fields, order_by=order_by, store=store)

    query.__doc__ = f"Query rows of the {table} table."
    query.table = table
    return query


# Schedule tables
get_agencies = _table_query("agency")
get_stops = _table_query("stops")
get_routes = _table_query("routes")
get_trips = _table_query("trips")
get_stop_times = _table_query("stop_times")
get_calendars = _table_query("calendar")
get_calendar_dates = _table_query("calendar_dates")
get_fare_attributes = _table_query("fare_attributes")
get_fare_rules = _table_query("fare_rules")
get_shapes = _table_query("shapes")
get_frequencies = _table_query("frequencies")
get_transfers = _table_query("transfers")
get_pathways = _table_query("pathways")
get_levels = _table_query("levels")
get_feed_info = _table_query("feed_info")
get_translations = _table_query("translations")
get_attributions = _table_query("attributions")

# Extension tables
get_directions = _table_query("directions")
get_stop_attributes = _table_query("stop_attributes")
get_timetables = _table_query("timetables")
get_timetable_pages = _table_query("timetable_pages")
get_timetable_stop_orders = _table_query("timetable_stop_order")
get_timetable_notes = _table_query("timetable_notes")
get_timetable_notes_references = _table_query("timetable_notes_references")

# Ridership tables
get_board_alights = _table_query("board_alights")
get_ride_feed_infos = _table_query("ride_feed_info")
get_rider_trips = _table_query("rider_trips")
get_riderships = _table_query("riderships")
get_trip_capacities = _table_query("trip_capacities")

QUERY_FUNCTIONS = {
    fn.table: fn
    for fn in (
        get_agencies, get_stops, get_routes, get_trips, get_stop_times,
        get_calendars, get_calendar_dates, get_fare_attributes, get_fare_rules,
        get_shapes, get_frequencies, get_transfers, get_pathways, get_levels,
        get_feed_info, get_translations, get_attributions,
        get_directions, get_stop_attributes, get_timetables, get_timetable_pages,
        get_timetable_stop_orders, get_timetable_notes, get_timetable_notes_references,
        get_board_alights, get_ride_feed_infos, get_rider_trips, get_riderships,
        get_trip_capacities,
    )
}

__all__ = [
    "QUERY_FUNCTIONS",
    "query_table",
    "get_agencies",
    "get_stops",
    "get_routes",
    "get_trips",
    "get_stop_times",
    "get_calendars",
    "get_calendar_dates",
    "get_fare_attributes",
    "get_fare_rules",
    "get_shapes",
    "get_frequencies",
    "get_transfers",
    "get_pathways",
    "get_levels",
    "get_feed_info",
    "get_translations",
    "get_attributions",
    "get_directions",
    "get_stop_attributes",
    "get_timetables",
    "get_timetable_pages",
    "get_timetable_stop_orders",
    "get_timetable_notes",
    "get_timetable_notes_references",
    "get_board_alights",
    "get_ride_feed_infos",
    "get_rider_trips",
    "get_riderships",
    "get_trip_capacities",
]
