"""
Central registry for all schema classes and their mappings.
This provides a single source of truth for table-to-schema relationships
and the column descriptors derived from them.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

from gtfs_store.common.errors import UnknownTableError
from gtfs_store.schemas.common.columns import DATE, FLOAT, INTEGER, STRING, SYSTEM_COLUMNS, TIME
from gtfs_store.schemas.common.schema_utils import _get_schema_attribute

# Schedule schemas
from gtfs_store.schemas.schedule import (
    Agency,
    Attributions,
    Calendar,
    CalendarDates,
    FareAttributes,
    FareRules,
    FeedInfo,
    Frequencies,
    Levels,
    Pathways,
    Routes,
    Shapes,
    StopTimes,
    Stops,
    Transfers,
    Translations,
    Trips,
)

# Extension schemas
from gtfs_store.schemas.extensions import (
    Directions,
    StopAttributes,
    TimetableNotes,
    TimetableNotesReferences,
    TimetablePages,
    Timetables,
    TimetableStopOrder,
)

# Ridership schemas
from gtfs_store.schemas.ridership import (
    BoardAlights,
    RideFeedInfo,
    RiderTrips,
    Riderships,
    TripCapacities,
)

# Table to Schema Class Mapping, in load order
DATASET_SCHEMA_MAPPING = {
    # Schedule tables
    'agency': Agency,
    'stops': Stops,
    'routes': Routes,
    'trips': Trips,
    'stop_times': StopTimes,
    'calendar': Calendar,
    'calendar_dates': CalendarDates,
    'fare_attributes': FareAttributes,
    'fare_rules': FareRules,
    'shapes': Shapes,
    'frequencies': Frequencies,
    'transfers': Transfers,
    'pathways': Pathways,
    'levels': Levels,
    'feed_info': FeedInfo,
    'translations': Translations,
    'attributions': Attributions,

    # Extension tables
    'directions': Directions,
    'stop_attributes': StopAttributes,
    'timetables': Timetables,
    'timetable_pages': TimetablePages,
    'timetable_stop_order': TimetableStopOrder,
    'timetable_notes': TimetableNotes,
    'timetable_notes_references': TimetableNotesReferences,

    # Ridership tables
    'board_alights': BoardAlights,
    'ride_feed_info': RideFeedInfo,
    'rider_trips': RiderTrips,
    'riderships': Riderships,
    'trip_capacities': TripCapacities,
}

@dataclass(frozen=True)
class ColumnSpec:
    name: str
    type: str
    required: bool
    description: str = ""


@dataclass(frozen=True)
class TableInfo:
    """Table-level descriptor: where the table comes from and how it is keyed."""

    name: str
    filename: str
    group: str
    required: bool
    primary_key: Tuple[str, ...]
    indexes: Tuple[str, ...]
    columns: Tuple[ColumnSpec, ...]
    schema_class: type
    description: str = ""


def get_schema_class(table_name: str):
    """
    Get the schema class for a table.

    Args:
        table_name: Table name (e.g., 'stops', 'stop_times')

    Returns:
        Schema class or None if not found
    """
    return DATASET_SCHEMA_MAPPING.get(table_name)


def _semantic_type(column_name: str, dtype, time_columns: List[str]) -> str:
    if column_name in time_columns:
        return TIME

    dtype_str = str(dtype).lower()
    if dtype_str.startswith("int"):
        return INTEGER
    if dtype_str.startswith("float"):
        return FLOAT
    if "datetime" in dtype_str or "timestamp" in dtype_str:
        return DATE
    return STRING


def _group_of(schema_class) -> str:
    module = schema_class.__module__
    if ".extensions." in module:
        return "extension"
    if ".ridership." in module:
        return "ridership"
    return "standard"


@lru_cache(maxsize=None)
def get_table_info(table_name: str) -> TableInfo:
    """
    Build the descriptor of a registered table.

    Raises:
        UnknownTableError: If the table is not registered
    """
    schema_class = get_schema_class(table_name)
    if schema_class is None:
        raise UnknownTableError(table_name)

    schema = schema_class.to_schema()
    time_columns = _get_schema_attribute(schema_class, 'COLS_TIME', [])

    columns = tuple(
        ColumnSpec(
            name=name,
            type=_semantic_type(name, column.dtype, time_columns),
            required=not column.nullable,
            description=column.description or "",
        )
        for name, column in schema.columns.items()
        if name not in SYSTEM_COLUMNS
    )

    return TableInfo(
        name=table_name,
        filename=getattr(schema_class, '_filename', f"{table_name}.txt"),
        group=_group_of(schema_class),
        required=getattr(schema_class, '_required', False),
        primary_key=tuple(getattr(schema_class, '_primary_key', [])),
        indexes=tuple(getattr(schema_class, '_indexes', [])),
        columns=columns,
        schema_class=schema_class,
        description=getattr(schema_class, '_description', ""),
    )


def describe(table_name: str) -> List[ColumnSpec]:
    """Column descriptors of a table in file order, excluding store-owned columns."""
    return list(get_table_info(table_name).columns)


def time_columns(table_name: str) -> List[str]:
    return [c.name for c in get_table_info(table_name).columns if c.type == TIME]


def required_tables() -> List[str]:
    return [name for name in DATASET_SCHEMA_MAPPING if get_table_info(name).required]


def all_tables() -> List[str]:
    return list(DATASET_SCHEMA_MAPPING)


# Export essential items
__all__ = [
    'DATASET_SCHEMA_MAPPING',
    'ColumnSpec',
    'TableInfo',
    'STRING',
    'INTEGER',
    'FLOAT',
    'DATE',
    'TIME',
    'get_schema_class',
    'get_table_info',
    'describe',
    'time_columns',
    'required_tables',
    'all_tables',
]
