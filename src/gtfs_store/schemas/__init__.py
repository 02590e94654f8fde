"""
GTFS Table Schemas
==================

Pandera DataFrameModels for every table the store knows about, grouped as
standard schedule tables, non-standard extensions and GTFS-ride ridership.
"""

from .schema_registry import (
    DATASET_SCHEMA_MAPPING,
    ColumnSpec,
    TableInfo,
    all_tables,
    describe,
    get_schema_class,
    get_table_info,
    required_tables,
    time_columns,
)

__all__ = [
    'DATASET_SCHEMA_MAPPING',
    'ColumnSpec',
    'TableInfo',
    'all_tables',
    'describe',
    'get_schema_class',
    'get_table_info',
    'required_tables',
    'time_columns',
]
