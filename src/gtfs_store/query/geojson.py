"""GeoJSON views of stops and shapes, built as plain dicts."""

from datetime import date
from typing import Any, Dict, List, Mapping, Optional

import numpy as np

from gtfs_store.common.logging_utils import logger
from gtfs_store.store.database import GTFSStore
from .queries import get_shapes, get_stops

Feature = Dict[str, Any]


def _valid_coordinate(lat: Any, lon: Any) -> bool:
    try:
        lat_f = float(lat)
        lon_f = float(lon)
    except (TypeError, ValueError):
        return False
    if not (np.isfinite(lat_f) and np.isfinite(lon_f)):
        return False
    return -90.0 <= lat_f <= 90.0 and -180.0 <= lon_f <= 180.0


def _property_value(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    return value


def feature_collection(features: List[Feature]) -> Dict[str, Any]:
    return {"type": "FeatureCollection", "features": features}


def get_stops_as_geojson(where: Optional[Mapping[str, Any]] = None, store: Optional[GTFSStore] = None) -> Dict[str, Any]:
    """
    One Point feature per stop row, coordinates ``[stop_lon, stop_lat]``.

    Stops without valid coordinates (missing, non-finite or out of range) are left out.
    Properties hold every other column, dates as ISO strings.
    """
    features = []
    for row in get_stops(where=where, store=store):
        lat = row.get("stop_lat")
        lon = row.get("stop_lon")
        if not _valid_coordinate(lat, lon):
            continue
        properties = {
            key: _property_value(value)
            for key, value in row.items()
            if key not in ("stop_lat", "stop_lon")
        }
        features.append({
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [float(lon), float(lat)]},
            "properties": properties,
        })

    logger.debug("Stops GeoJSON built: features=%d", len(features))
    return feature_collection(features)


def get_shapes_as_geojson(where: Optional[Mapping[str, Any]] = None, store: Optional[GTFSStore] = None) -> Dict[str, Any]:
    """
    One LineString feature per (agency_key, shape_id), points in shape_pt_sequence order.

    Points with invalid coordinates are skipped; a shape left with fewer
    than two points produces no feature.
    """
    rows = get_shapes(
        where=where,
        order_by=[("agency_key", "ASC"), ("shape_id", "ASC"), ("shape_pt_sequence", "ASC")],
        store=store,
    )

    lines: Dict[tuple, List[List[float]]] = {}
    for row in rows:
        key = (row["agency_key"], row["shape_id"])
        points = lines.setdefault(key, [])
        if _valid_coordinate(row.get("shape_pt_lat"), row.get("shape_pt_lon")):
            points.append([float(row["shape_pt_lon"]), float(row["shape_pt_lat"])])

    features = [
        {
            "type": "Feature",
            "geometry": {"type": "LineString", "coordinates": points},
            "properties": {"shape_id": shape_id, "agency_key": agency_key},
        }
        for (agency_key, shape_id), points in lines.items()
        if len(points) >= 2
    ]

    dropped = len(lines) - len(features)
    if dropped:
        logger.debug("Shapes without enough valid points left out: shapes=%d", dropped)
    return feature_collection(features)


__all__ = [
    "feature_collection",
    "get_shapes_as_geojson",
    "get_stops_as_geojson",
]
