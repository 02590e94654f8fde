"""
GTFS Store
==========

Load GTFS feeds into a SQLite store, query them, derive GeoJSON and export
agency datasets back to GTFS files.

Usage:
    from gtfs_store import open_store, import_feed, get_routes

    open_store()
    import_feed("feeds/stcp.zip")
    routes = get_routes(where={"route_type": 3}, order_by=["route_short_name"])
"""

from gtfs_store.common.config import AgencyConfig, StoreConfig, load_config
from gtfs_store.common.errors import *  # noqa: F401,F403
from gtfs_store.common.errors import __all__ as _errors_all
from gtfs_store.export import ExportSummary, export_agency, export_gtfs
from gtfs_store.ingest import ImportSummary, import_feed, import_gtfs
from gtfs_store.query import *  # noqa: F401,F403
from gtfs_store.query import __all__ as _query_all
from gtfs_store.schemas import ColumnSpec, TableInfo, all_tables, describe, required_tables
from gtfs_store.store import GTFSStore, close_store, get_store, open_store

__version__ = "0.1.0"

__all__ = [
    "AgencyConfig",
    "ColumnSpec",
    "ExportSummary",
    "GTFSStore",
    "ImportSummary",
    "StoreConfig",
    "TableInfo",
    "all_tables",
    "close_store",
    "describe",
    "export_agency",
    "export_gtfs",
    "get_store",
    "import_feed",
    "import_gtfs",
    "load_config",
    "open_store",
    "required_tables",
] + list(_errors_all) + list(_query_all)
