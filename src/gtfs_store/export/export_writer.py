# src/gtfs_store/export/export_writer.py
"""Write stored agency datasets back out as GTFS CSV files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import pandas as pd

from gtfs_store.common.config import StoreConfig, config_from_dict
from gtfs_store.common.errors import ExportError
from gtfs_store.common.gtfs_types import format_gtfs_date, format_gtfs_time
from gtfs_store.common.logging_utils import logger, set_verbose
from gtfs_store.common.timing import Timer
from gtfs_store.schemas.common.columns import DATE, FLOAT, INTEGER, TIME
from gtfs_store.schemas.schema_registry import ColumnSpec, all_tables, get_table_info
from gtfs_store.store.database import GTFSStore
from gtfs_store.store.lifecycle import get_store, is_store_open, open_store, resolve_store


@dataclass
class ExportSummary:
    """Outcome of one agency export."""

    agency_key: str
    destination: str
    row_counts: Dict[str, int] = field(default_factory=dict)
    files: List[str] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def total_rows(self) -> int:
        return sum(self.row_counts.values())


def _format_integer(value: Any) -> str:
    return "" if value is None else str(int(value))


def _format_float(value: Any) -> str:
    return "" if value is None else repr(float(value))


def _format_string(value: Any) -> str:
    return "" if value is None else str(value)


_FORMATTERS: Dict[str, Callable[[Any], str]] = {
    TIME: format_gtfs_time,
    DATE: format_gtfs_date,
    INTEGER: _format_integer,
    FLOAT: _format_float,
}


def rows_to_dataframe(rows: List[Dict[str, Any]], columns: List[ColumnSpec]) -> pd.DataFrame:
    """Format stored rows as GTFS text, one column per spec in file order."""
    data = {}
    for spec in columns:
        formatter = _FORMATTERS.get(spec.type, _format_string)
        data[spec.name] = [formatter(row.get(spec.name)) for row in rows]
    return pd.DataFrame(data, columns=[spec.name for spec in columns], dtype=object)


def export_agency(agency_key: str, destination_dir: str, store: Optional[GTFSStore] = None) -> ExportSummary:
    """
    Export one agency dataset as ``<table>.txt`` files.

    Tables without rows for the agency are not written. Holds the agency
    lock so an import of the same key cannot interleave.

    Args:
        agency_key: Dataset to export
        destination_dir: Directory to write into (created if missing)
        store: Source store; defaults to the open default store

    Returns:
        ExportSummary with per-table row counts and the files written

    Raises:
        ExportError: If the agency key has no rows or the destination cannot be written
    """
    store = resolve_store(store)
    destination = Path(destination_dir)
    summary = ExportSummary(agency_key=agency_key, destination=str(destination))

    with Timer() as timer, store.agency_lock(agency_key):
        if agency_key not in store.agency_keys():
            raise ExportError(f"Unknown agency key: {agency_key}")

        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ExportError(f"Cannot create export directory {destination}: {exc}") from exc

        for table_name in all_tables():
            info = get_table_info(table_name)
            rows = store.query(table_name, where={"agency_key": agency_key})
            if not rows:
                continue

            df = rows_to_dataframe(rows, list(info.columns))
            path = destination / info.filename
            try:
                df.to_csv(path, index=False)
            except OSError as exc:
                raise ExportError(f"Cannot write {path}: {exc}") from exc

            summary.row_counts[table_name] = len(df)
            summary.files.append(str(path))
            logger.info("Export file written: agency_key=%s file=%s rows=%d", agency_key, info.filename, len(df))

    summary.duration_seconds = timer.duration
    logger.info(
        "Export complete: agency_key=%s destination=%s files=%d rows=%d duration=%.2fs",
        agency_key,
        destination,
        len(summary.files),
        summary.total_rows,
        summary.duration_seconds,
    )
    return summary


def export_gtfs(
    config: Union[StoreConfig, Mapping[str, Any]],
    store: Optional[GTFSStore] = None,
) -> List[ExportSummary]:
    """Export every configured agency to ``<export_path>/<agency_key>/``."""
    if not isinstance(config, StoreConfig):
        config = config_from_dict(dict(config))

    set_verbose(config.verbose)

    if store is None:
        store = get_store() if is_store_open() else open_store(config.sqlite_path)

    return [
        export_agency(agency.agency_key, os.path.join(config.export_path, agency.agency_key), store=store)
        for agency in config.agencies
    ]


__all__ = [
    "ExportSummary",
    "export_agency",
    "export_gtfs",
    "rows_to_dataframe",
]
