# src/gtfs_store/ingest/feed_loader.py
"""Load GTFS feeds into the store, one agency dataset per import."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd

from gtfs_store.common.config import StoreConfig, config_from_dict, default_agency_key, normalize_csv_options
from gtfs_store.common.errors import DuplicateKeyError, MalformedRowError, MissingRequiredTableError
from gtfs_store.common.logging_utils import logger, set_verbose
from gtfs_store.common.timing import Timer
from gtfs_store.schemas.common.schema_utils import clean_and_validate_dataframe
from gtfs_store.schemas.schema_registry import TableInfo, all_tables, get_table_info
from gtfs_store.store.database import GTFSStore
from gtfs_store.store.lifecycle import is_store_open, get_store, open_store, resolve_store
from .feed_source import open_feed_source


@dataclass
class ImportSummary:
    """Outcome of one feed import."""

    agency_key: str
    source: str
    row_counts: Dict[str, int] = field(default_factory=dict)
    skipped_tables: List[str] = field(default_factory=list)
    excluded_tables: List[str] = field(default_factory=list)
    warnings: List[MalformedRowError] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def total_rows(self) -> int:
        return sum(self.row_counts.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "agency_key": self.agency_key,
            "source": self.source,
            "row_counts": dict(self.row_counts),
            "skipped_tables": list(self.skipped_tables),
            "excluded_tables": list(self.excluded_tables),
            "warnings": [w.to_dict() for w in self.warnings],
            "duration_seconds": self.duration_seconds,
        }


def _plain(value: Any) -> Any:
    if isinstance(value, pd.Timestamp):
        return value.date()
    if hasattr(value, "item"):
        return value.item()
    return value


def check_primary_key(df: pd.DataFrame, info: TableInfo) -> None:
    """
    Raise if two rows share a primary key.

    Raises:
        DuplicateKeyError: For the first duplicated key, with the number of rows sharing it
    """
    if not info.primary_key or df.empty:
        return

    key_columns = list(info.primary_key)
    duplicated = df.duplicated(subset=key_columns, keep=False)
    if not duplicated.any():
        return

    counts = df.loc[duplicated].groupby(key_columns, dropna=False, sort=False).size()
    key = counts.index[0]
    if not isinstance(key, tuple):
        key = (key,)

    raise DuplicateKeyError(
        info.name,
        key_columns,
        [_plain(v) for v in key],
        count=int(counts.iloc[0]),
    )


def _normalize_exclude(exclude: Optional[Iterable[str]]) -> List[str]:
    known = set(all_tables())
    excluded = []
    for name in exclude or []:
        # Accept file names as well as table names
        table_name = str(name).strip()
        for suffix in (".txt", ".csv"):
            if table_name.endswith(suffix):
                table_name = table_name[: -len(suffix)]
        if table_name not in known:
            logger.warning("Ignoring unknown table in exclude list: %s", name)
            continue
        excluded.append(table_name)
    return excluded


def _parse_feed(
    source_path: str,
    agency_key: str,
    excluded: List[str],
    summary: ImportSummary,
    csv_options: Dict[str, Any],
) -> Dict[str, pd.DataFrame]:
    """Read, coerce and validate every table. Touches nothing in the store."""

    frames: Dict[str, pd.DataFrame] = {}

    with open_feed_source(source_path, csv_options=csv_options) as source:
        for table_name in all_tables():
            info = get_table_info(table_name)

            if table_name in excluded:
                summary.excluded_tables.append(table_name)
                continue

            filename = source.find(table_name, info.filename)
            if filename is None:
                if info.required:
                    raise MissingRequiredTableError(table_name, source_path)
                summary.skipped_tables.append(table_name)
                continue

            with Timer() as read_timer:
                df_raw, read_warnings = source.read_table(filename, table_name)

            with Timer() as transform_timer:
                df_clean, row_warnings = clean_and_validate_dataframe(df_raw, info, agency_key)
                check_primary_key(df_clean, info)

            summary.warnings.extend(read_warnings)
            summary.warnings.extend(row_warnings)
            frames[table_name] = df_clean

            logger.info(
                "Feed table parsed: agency_key=%s file=%s rows=%d dropped=%d read=%.2fs transform=%.2fs",
                agency_key,
                filename,
                len(df_clean),
                len(df_raw) - len(df_clean),
                read_timer.duration,
                transform_timer.duration,
            )

    return frames


def import_feed(
    source_path: str,
    exclude: Optional[Iterable[str]] = None,
    agency_key: Optional[str] = None,
    store: Optional[GTFSStore] = None,
    csv_options: Optional[Dict[str, Any]] = None,
) -> ImportSummary:
    """
    Import a GTFS feed as one agency dataset, replacing any previous import of the same key.

    Args:
        source_path: Feed directory or .zip archive
        exclude: Table names to skip
        agency_key: Dataset key; defaults to the source basename without extension
        store: Target store; defaults to the open default store
        csv_options: CSV parser options (e.g. ``{"delimiter": ";"}``)

    Returns:
        ImportSummary with per-table row counts and dropped-row warnings

    Raises:
        ConfigError: If csv_options name an unknown or reserved parser option
        FeedSourceError: If the source is missing or unreadable
        MissingRequiredTableError: If a required table is absent and not excluded
        DuplicateKeyError: If two rows of a table share a primary key
    """
    store = resolve_store(store)
    source_path = str(source_path)
    agency_key = agency_key or default_agency_key(source_path)
    excluded = _normalize_exclude(exclude)
    read_options = normalize_csv_options(csv_options)
    summary = ImportSummary(agency_key=agency_key, source=source_path)

    logger.info("Feed import start: agency_key=%s source=%s excluded=%s", agency_key, source_path, excluded)

    with Timer() as timer:
        frames = _parse_feed(source_path, agency_key, excluded, summary, read_options)

        with Timer() as insert_timer:
            with store.transaction(agency_key) as conn:
                removed = store.replace_agency(conn, agency_key)
                for table_name, df in frames.items():
                    summary.row_counts[table_name] = store.insert_dataframe(conn, table_name, df)

    summary.duration_seconds = timer.duration

    logger.info(
        "Feed import complete: agency_key=%s tables=%d rows=%d replaced=%d skipped=%d warnings=%d insert=%.2fs duration=%.2fs",
        agency_key,
        len(summary.row_counts),
        summary.total_rows,
        removed,
        len(summary.skipped_tables),
        len(summary.warnings),
        insert_timer.duration,
        summary.duration_seconds,
    )

    return summary


def import_gtfs(
    config: Union[StoreConfig, Mapping[str, Any]],
    store: Optional[GTFSStore] = None,
) -> List[ImportSummary]:
    """
    Import every agency listed in a configuration, in order.

    Opens the configured store when no store is given and none is open.
    Stops at the first fatal error; agencies imported before it stay committed.
    """
    if not isinstance(config, StoreConfig):
        config = config_from_dict(dict(config))

    set_verbose(config.verbose)

    if store is None:
        store = get_store() if is_store_open() else open_store(config.sqlite_path)

    summaries = []
    with Timer() as timer:
        for agency in config.agencies:
            summaries.append(
                import_feed(
                    agency.path,
                    exclude=agency.exclude,
                    agency_key=agency.agency_key,
                    store=store,
                    csv_options=config.csv_options,
                )
            )

    logger.info(
        "Batch import complete: agencies=%d rows=%d duration=%.2fs",
        len(summaries),
        sum(s.total_rows for s in summaries),
        timer.duration,
    )
    return summaries


__all__ = [
    "ImportSummary",
    "check_primary_key",
    "import_feed",
    "import_gtfs",
]
