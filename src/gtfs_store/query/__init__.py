"""Query engine: filtered reads of stored tables and GeoJSON views."""

from .geojson import get_shapes_as_geojson, get_stops_as_geojson
from .queries import *  # noqa: F401,F403
from .queries import __all__ as _query_all

__all__ = list(_query_all) + [
    "get_shapes_as_geojson",
    "get_stops_as_geojson",
]
