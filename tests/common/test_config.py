"""Tests for configuration loading."""

import json

import pytest

from gtfs_store.common.config import (
    DEFAULT_EXPORT_PATH,
    AgencyConfig,
    config_from_dict,
    default_agency_key,
    load_config,
    normalize_csv_options,
)
from gtfs_store.common.errors import ConfigError


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ("GTFS_SQLITE_PATH", "GTFS_EXPORT_PATH", "GTFS_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


def test_default_agency_key_strips_zip_extension():
    assert default_agency_key("/feeds/stcp.zip") == "stcp"
    assert default_agency_key("/feeds/metro/") == "metro"


def test_load_config_accepts_camel_case_keys(tmp_path):
    """The file may use sqlitePath/exportPath and agencyKey."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "sqlitePath": "db/gtfs.db",
        "exportPath": "out",
        "verbose": False,
        "agencies": [
            {"agencyKey": "metro", "path": "feeds/metro.zip", "exclude": ["shapes"]},
            {"path": "feeds/bus.zip"},
        ],
    }))

    config = load_config(str(path))

    assert config.sqlite_path == "db/gtfs.db"
    assert config.export_path == "out"
    assert config.verbose is False
    assert [a.agency_key for a in config.agencies] == ["metro", "bus"], (
        "agency key should default to the feed basename"
    )
    assert config.agencies[0].exclude == ["shapes"]


def test_defaults_without_file():
    config = load_config()
    assert config.sqlite_path is None, "no path means an in-memory store"
    assert config.export_path == DEFAULT_EXPORT_PATH
    assert config.verbose is True
    assert config.agencies == []


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"sqlite_path": "a.db", "verbose": True}))
    monkeypatch.setenv("GTFS_SQLITE_PATH", "b.db")
    monkeypatch.setenv("GTFS_VERBOSE", "no")

    config = load_config(str(path), overrides={"export_path": "x"})

    assert config.sqlite_path == "b.db"
    assert config.verbose is False
    assert config.export_path == "x"


def test_invalid_configuration_raises_config_error(tmp_path):
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json")

    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.json"))
    with pytest.raises(ConfigError):
        load_config(str(bad_json))
    with pytest.raises(ConfigError):
        config_from_dict({"agencies": [{"url": "https://example.com/feed.zip"}]})
    with pytest.raises(ConfigError):
        config_from_dict({"verbose": "maybe"})
    with pytest.raises(ConfigError):
        load_config(overrides={"colour": "blue"})
    with pytest.raises(ConfigError):
        AgencyConfig(path="")


def test_csv_options_are_read_and_normalized():
    config = config_from_dict({"csvOptions": {"delimiter": ";", "quote": "'", "encoding": "latin-1"}})

    assert config.csv_options == {"sep": ";", "quotechar": "'", "encoding": "latin-1"}
    assert normalize_csv_options(config.csv_options) == config.csv_options, "normalizing twice changes nothing"
    assert load_config(overrides={"csv_options": {"delimiter": "|"}}).csv_options == {"sep": "|"}


@pytest.mark.parametrize("options", [
    {"dtype": "int64"},
    {"on_bad_lines": "error"},
    {"delimitr": ";"},
    {"delimiter": ";", "sep": ","},
    ["sep", ";"],
])
def test_invalid_csv_options_raise_config_error(options):
    with pytest.raises(ConfigError):
        normalize_csv_options(options)
