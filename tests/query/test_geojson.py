"""Tests for GeoJSON views of stops and shapes."""

import pytest

from gtfs_store.ingest.feed_loader import import_feed
from gtfs_store.query.geojson import get_shapes_as_geojson, get_stops_as_geojson
from gtfs_store.query.queries import get_stops


@pytest.fixture
def loaded(store, feed_dir):
    import_feed(str(feed_dir), store=store)
    return store


def test_stops_without_coordinates_are_left_out(loaded):
    collection = get_stops_as_geojson(store=loaded)

    assert collection["type"] == "FeatureCollection"
    assert len(collection["features"]) <= len(get_stops(store=loaded))
    assert [f["properties"]["stop_id"] for f in collection["features"]] == ["S1", "S2", "S3", "S4"]


def test_stop_feature_layout(loaded):
    feature = get_stops_as_geojson(where={"stop_id": "S1"}, store=loaded)["features"][0]

    assert feature["geometry"] == {"type": "Point", "coordinates": [-8.61, 41.15]}, "GeoJSON order is lon, lat"
    assert feature["properties"]["stop_name"] == "Alpha"
    assert feature["properties"]["agency_key"] == "demo"
    assert "stop_lat" not in feature["properties"]


def test_shapes_become_linestrings(loaded):
    """SH2 keeps one valid point after its out-of-range latitude is dropped, so it is omitted."""
    collection = get_shapes_as_geojson(store=loaded)

    assert len(collection["features"]) == 1
    feature = collection["features"][0]
    assert feature["properties"] == {"shape_id": "SH1", "agency_key": "demo"}
    assert feature["geometry"]["type"] == "LineString"
    assert feature["geometry"]["coordinates"] == [[-8.61, 41.15], [-8.62, 41.16], [-8.64, 41.18]]


def test_shapes_are_split_by_agency(store, feed_dir):
    import_feed(str(feed_dir), agency_key="one", store=store)
    import_feed(str(feed_dir), agency_key="two", store=store)

    features = get_shapes_as_geojson(where={"shape_id": "SH1"}, store=store)["features"]
    assert [f["properties"]["agency_key"] for f in features] == ["one", "two"]
