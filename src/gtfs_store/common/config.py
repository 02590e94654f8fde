"""
Configuration
=============

Loads the store configuration from a JSON file and the environment.

File layout (camelCase and snake_case keys are both accepted)::

    {
        "sqlitePath": "./db/gtfs.db",
        "exportPath": "./gtfs-export",
        "verbose": true,
        "csvOptions": {"delimiter": ";"},
        "agencies": [
            {"agency_key": "stcp", "path": "./feeds/stcp.zip", "exclude": ["shapes"]}
        ]
    }

Environment variables override the file:
    GTFS_SQLITE_PATH, GTFS_EXPORT_PATH, GTFS_VERBOSE
"""

import inspect
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from gtfs_store.common.errors import ConfigError

DEFAULT_EXPORT_PATH = "gtfs-export"

# csv-parse option names mapped to their pandas.read_csv equivalents
_CSV_OPTION_ALIASES = {
    "delimiter": "sep",
    "quote": "quotechar",
    "escape": "escapechar",
}

# Options the loader relies on: values are read as text and bad lines become warnings
_RESERVED_CSV_OPTIONS = {
    "converters",
    "chunksize",
    "dtype",
    "header",
    "index_col",
    "iterator",
    "keep_default_na",
    "na_values",
    "names",
    "on_bad_lines",
    "usecols",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def default_agency_key(path: str) -> str:
    """Derive an agency key from a feed path: ``/feeds/stcp.zip`` -> ``stcp``."""
    name = Path(str(path).rstrip("/\\")).name
    if name.lower().endswith(".zip"):
        name = name[:-4]
    return name


@dataclass
class AgencyConfig:
    path: str
    agency_key: str = ""
    exclude: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.path:
            raise ConfigError("Agency configuration requires a 'path'")
        if not self.agency_key:
            self.agency_key = default_agency_key(self.path)


@dataclass
class StoreConfig:
    sqlite_path: Optional[str] = None
    export_path: str = DEFAULT_EXPORT_PATH
    verbose: bool = True
    csv_options: Dict[str, Any] = field(default_factory=dict)
    agencies: List[AgencyConfig] = field(default_factory=list)


def _pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


def normalize_csv_options(options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Turn user CSV options into ``pandas.read_csv`` keyword arguments.

    Raises:
        ConfigError: If the options are not a mapping, name an unknown option
            or override a setting the loader relies on
    """
    if not options:
        return {}
    if not isinstance(options, dict):
        raise ConfigError("csvOptions must be an object of CSV parser options")

    known = set(inspect.signature(pd.read_csv).parameters) - {"filepath_or_buffer"}
    normalized: Dict[str, Any] = {}
    for name, value in options.items():
        key = _CSV_OPTION_ALIASES.get(name, name)
        if key not in known:
            raise ConfigError(f"Unknown CSV option: {name}")
        if key in _RESERVED_CSV_OPTIONS:
            raise ConfigError(f"CSV option cannot be overridden: {name}")
        if key in normalized:
            raise ConfigError(f"CSV option given twice: {name}")
        normalized[key] = value
    return normalized


def _parse_agency(entry: Any, position: int) -> AgencyConfig:
    if not isinstance(entry, dict):
        raise ConfigError(f"agencies[{position}] must be an object")

    if _pick(entry, "url") and not _pick(entry, "path"):
        raise ConfigError(f"agencies[{position}]: feed download is not supported, provide a local 'path'")

    exclude = _pick(entry, "exclude", default=[]) or []
    if not isinstance(exclude, (list, tuple)):
        raise ConfigError(f"agencies[{position}].exclude must be a list of table names")

    return AgencyConfig(
        path=str(_pick(entry, "path", default="") or ""),
        agency_key=str(_pick(entry, "agency_key", "agencyKey", default="") or ""),
        exclude=[str(name) for name in exclude],
    )


def config_from_dict(data: Dict[str, Any]) -> StoreConfig:
    """Build a :class:`StoreConfig` from an already-parsed mapping."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    agencies_raw = _pick(data, "agencies", default=[]) or []
    if not isinstance(agencies_raw, list):
        raise ConfigError("'agencies' must be a list")

    sqlite_path = _pick(data, "sqlite_path", "sqlitePath")
    return StoreConfig(
        sqlite_path=str(sqlite_path) if sqlite_path else None,
        export_path=str(_pick(data, "export_path", "exportPath", default=DEFAULT_EXPORT_PATH)),
        verbose=_parse_bool(_pick(data, "verbose", default=True), "verbose"),
        csv_options=normalize_csv_options(_pick(data, "csv_options", "csvOptions")),
        agencies=[_parse_agency(entry, i) for i, entry in enumerate(agencies_raw)],
    )


def get_globals() -> Dict[str, Any]:
    """Read overrides from the environment; unset variables are omitted."""
    overrides: Dict[str, Any] = {}

    sqlite_path = os.getenv("GTFS_SQLITE_PATH")
    export_path = os.getenv("GTFS_EXPORT_PATH")
    verbose = os.getenv("GTFS_VERBOSE")

    if sqlite_path is not None:
        overrides["sqlite_path"] = sqlite_path or None
    if export_path:
        overrides["export_path"] = export_path
    if verbose is not None:
        overrides["verbose"] = _parse_bool(verbose, "GTFS_VERBOSE")
    return overrides


def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> StoreConfig:
    """Load configuration from ``path`` (optional), then environment, then ``overrides``.

    Args:
        path: JSON configuration file. When None only defaults and the environment apply.
        overrides: Explicit values (snake_case keys) taking precedence over everything else.

    Returns:
        The resolved StoreConfig.

    Raises:
        ConfigError: If the file is missing, not valid JSON, or has invalid values.
    """
    data: Dict[str, Any] = {}
    if path is not None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Configuration file not found: {path}") from e
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigError(f"Could not load {path}: {e}") from e

    config = config_from_dict(data)

    merged = get_globals()
    merged.update(overrides or {})
    for key, value in merged.items():
        if key == "agencies":
            config.agencies = [
                a if isinstance(a, AgencyConfig) else _parse_agency(a, i) for i, a in enumerate(value)
            ]
        elif key == "csv_options":
            config.csv_options = normalize_csv_options(value)
        elif hasattr(config, key):
            setattr(config, key, value)
        else:
            raise ConfigError(f"Unknown configuration key: {key}")

    return config


__all__ = [
    "DEFAULT_EXPORT_PATH",
    "AgencyConfig",
    "StoreConfig",
    "config_from_dict",
    "default_agency_key",
    "get_globals",
    "load_config",
    "normalize_csv_options",
]
