"""
Relational Store
================

SQLAlchemy Core store over SQLite. One table per registered GTFS table, each
carrying the schema columns plus an ``agency_key`` tag and an ``id``
surrogate that records insertion order.
"""

import math
import threading
from contextlib import ExitStack, contextmanager, nullcontext
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd
from sqlalchemy import (
    Column,
    Date,
    Float,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    delete,
    func,
    select,
)
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.pool import StaticPool

from gtfs_store.common.errors import NotOpenError, UnknownFieldError, UnknownTableError
from gtfs_store.common.gtfs_types import parse_gtfs_date, parse_gtfs_time
from gtfs_store.common.logging_utils import logger
from gtfs_store.schemas.common.columns import DATE, FLOAT, INTEGER, SYSTEM_COLUMNS, TIME
from gtfs_store.schemas.schema_registry import ColumnSpec, all_tables, get_table_info

MEMORY_PATHS = (None, "", ":memory:")
INSERT_CHUNK_SIZE = 5000

ASC = "ASC"
DESC = "DESC"

_SQL_TYPES = {
    INTEGER: Integer,
    TIME: Integer,
    FLOAT: Float,
    DATE: Date,
}

OrderSpec = Sequence[Union[str, Tuple[str, str]]]


def _to_db_value(value: Any) -> Any:
    """Convert pandas/numpy scalars to plain Python values accepted by the DB-API."""
    if value is None or value is pd.NA or value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        return value.date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, (float, np.floating)):
        return None if math.isnan(value) else float(value)
    return value


class GTFSStore:
    """
    Handle on one SQLite database holding any number of agency datasets.

    Args:
        sqlite_path: Database file. None or ":memory:" keeps the database in memory.
    """

    def __init__(self, sqlite_path: Optional[str] = None):
        self.sqlite_path = None if sqlite_path in MEMORY_PATHS else str(sqlite_path)
        self._engine: Optional[Engine] = None
        self._metadata = MetaData()
        self._specs: Dict[str, Dict[str, ColumnSpec]] = {}
        self._write_lock = threading.RLock()
        self._agency_locks: Dict[str, threading.RLock] = {}
        self._agency_locks_guard = threading.Lock()

    def __repr__(self) -> str:
        return f"GTFSStore(sqlite_path={self.sqlite_path!r}, open={self.is_open})"

    @property
    def in_memory(self) -> bool:
        return self.sqlite_path is None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> "GTFSStore":
        """Create the engine and every registered table (idempotent)."""
        if self._engine is not None:
            return self

        if self.in_memory:
            # A single shared connection, otherwise each connection gets its own empty database
            self._engine = create_engine(
                "sqlite://",
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            Path(self.sqlite_path).parent.mkdir(parents=True, exist_ok=True)
            self._engine = create_engine(
                f"sqlite:///{self.sqlite_path}",
                connect_args={"check_same_thread": False},
            )

        for table_name in all_tables():
            info = get_table_info(table_name)
            self.create_table(table_name, info.columns, info.primary_key, info.indexes)

        logger.info("Store opened: path=%s tables=%d", self.sqlite_path or ":memory:", len(self._specs))
        return self

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("Store closed: path=%s", self.sqlite_path or ":memory:")

    def __enter__(self) -> "GTFSStore":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _require_engine(self) -> Engine:
        if self._engine is None:
            raise NotOpenError("Store is not open")
        return self._engine

    def _read_guard(self):
        # In-memory stores share one DB-API connection across threads
        return self._write_lock if self.in_memory else nullcontext()

    def _table(self, name: str) -> Table:
        if name not in self._specs:
            raise UnknownTableError(name)
        return self._metadata.tables[name]

    # ------------------------------------------------------------------ schema

    def create_table(
        self,
        name: str,
        column_specs: Iterable[ColumnSpec],
        primary_key: Sequence[str] = (),
        indexes: Sequence[str] = (),
    ) -> Table:
        """
        Create a table for the given column specs if it does not exist yet.

        The table gets an ``id`` insertion-order column and an indexed
        ``agency_key`` column; ``primary_key`` becomes a unique index scoped
        by agency.
        """
        engine = self._require_engine()
        column_specs = list(column_specs)

        table = self._metadata.tables.get(name)
        if table is None:
            columns = [
                Column("id", Integer, primary_key=True, autoincrement=True),
                Column("agency_key", Text, nullable=False),
            ]
            columns.extend(
                Column(spec.name, _SQL_TYPES.get(spec.type, Text), nullable=True)
                for spec in column_specs
            )
            table = Table(name, self._metadata, *columns)

            Index(f"ix_{name}_agency_key", table.c.agency_key)
            for column_name in indexes:
                Index(f"ix_{name}_{column_name}", table.c[column_name])
            if primary_key:
                Index(
                    f"ux_{name}_key",
                    table.c.agency_key,
                    *[table.c[c] for c in primary_key],
                    unique=True,
                )

        with self._write_lock:
            table.create(engine, checkfirst=True)

        self._specs[name] = {spec.name: spec for spec in column_specs}
        return table

    def tables(self) -> List[str]:
        return list(self._specs)

    def columns(self, table: str) -> List[str]:
        self._table(table)
        return list(self._specs[table])

    # ----------------------------------------------------------------- writing

    def _agency_lock(self, agency_key: str) -> threading.RLock:
        with self._agency_locks_guard:
            return self._agency_locks.setdefault(agency_key, threading.RLock())

    @contextmanager
    def agency_lock(self, agency_key: str) -> Iterator[None]:
        """Hold the lock serializing imports and exports of one agency key."""
        with self._agency_lock(agency_key):
            yield

    @contextmanager
    def transaction(self, agency_key: Optional[str] = None) -> Iterator[Connection]:
        """
        Open a write transaction.

        Commits when the block exits cleanly and rolls back on any exception.
        Holds the store write lock and, when ``agency_key`` is given, that
        agency's lock.
        """
        engine = self._require_engine()
        with ExitStack() as stack:
            if agency_key is not None:
                stack.enter_context(self.agency_lock(agency_key))
            stack.enter_context(self._write_lock)
            with engine.begin() as conn:
                yield conn

    def bulk_insert(self, conn: Connection, table: str, rows: Iterable[Mapping[str, Any]]) -> int:
        """Insert rows inside the caller's transaction, in chunks. Returns the number inserted."""
        target = self._table(table)
        allowed = set(self._specs[table]) | set(SYSTEM_COLUMNS)

        inserted = 0
        chunk: List[Dict[str, Any]] = []
        for row in rows:
            unknown = set(row) - allowed
            if unknown:
                raise UnknownFieldError(table, sorted(unknown)[0])
            chunk.append({key: _to_db_value(value) for key, value in row.items()})
            if len(chunk) >= INSERT_CHUNK_SIZE:
                conn.execute(target.insert(), chunk)
                inserted += len(chunk)
                chunk = []

        if chunk:
            conn.execute(target.insert(), chunk)
            inserted += len(chunk)

        return inserted

    def insert_dataframe(self, conn: Connection, table: str, df: pd.DataFrame) -> int:
        if df.empty:
            return 0
        records = df.astype(object).to_dict("records")
        return self.bulk_insert(conn, table, records)

    def replace_agency(self, conn: Connection, agency_key: str) -> int:
        """Delete every row of ``agency_key`` across all tables inside the caller's transaction."""
        removed = 0
        for table_name in self._specs:
            table = self._metadata.tables[table_name]
            result = conn.execute(delete(table).where(table.c.agency_key == agency_key))
            removed += result.rowcount or 0
        return removed

    def delete_agency(self, agency_key: str) -> int:
        with self.transaction(agency_key) as conn:
            removed = self.replace_agency(conn, agency_key)
        logger.info("Agency deleted: agency_key=%s rows=%d", agency_key, removed)
        return removed

    # ----------------------------------------------------------------- reading

    def _check_field(self, table: str, field: str) -> None:
        if field not in self._specs[table] and field not in SYSTEM_COLUMNS:
            raise UnknownFieldError(table, field)

    def _literal(self, table: str, field: str, value: Any) -> Any:
        spec = self._specs[table].get(field)
        if spec is None or value is None:
            return value
        if spec.type == TIME and isinstance(value, str):
            return parse_gtfs_time(value)
        if spec.type == DATE and isinstance(value, (str, datetime, pd.Timestamp)):
            return parse_gtfs_date(value)
        return _to_db_value(value)

    def _where_clauses(self, table: str, where: Optional[Mapping[str, Any]]) -> list:
        target = self._table(table)
        clauses = []
        for field, value in (where or {}).items():
            self._check_field(table, field)
            column = target.c[field]
            if value is None:
                clauses.append(column.is_(None))
            elif isinstance(value, (list, tuple, set, frozenset)):
                clauses.append(column.in_([self._literal(table, field, v) for v in value]))
            else:
                clauses.append(column == self._literal(table, field, value))
        return clauses

    def _order_clauses(self, table: str, order_by: Optional[OrderSpec]) -> list:
        target = self._table(table)
        clauses = []
        for item in order_by or []:
            if isinstance(item, str):
                field, direction = item, ASC
            else:
                field, direction = item
            self._check_field(table, field)
            direction = str(direction).upper()
            if direction == ASC:
                clauses.append(target.c[field].asc())
            elif direction == DESC:
                clauses.append(target.c[field].desc())
            else:
                raise ValueError(f"Invalid sort direction for {field}: {direction!r}")
        clauses.append(target.c.id.asc())
        return clauses

    def query(
        self,
        table: str,
        where: Optional[Mapping[str, Any]] = None,
        fields: Optional[Sequence[str]] = None,
        order_by: Optional[OrderSpec] = None,
    ) -> List[Dict[str, Any]]:
        """
        Select rows from a table.

        Args:
            table: Registered table name
            where: Field -> literal (equality), collection (IN) or None (IS NULL)
            fields: Columns to return; empty or None returns every column plus agency_key
            order_by: Field names or (field, "ASC"|"DESC") pairs; ties keep insertion order

        Returns:
            List of row dicts

        Raises:
            UnknownTableError: If the table is not registered
            UnknownFieldError: If a field is not a column of the table
            ValueError: If a sort direction is not ASC or DESC
        """
        engine = self._require_engine()
        target = self._table(table)

        if fields:
            for field in fields:
                self._check_field(table, field)
            selected = list(fields)
        else:
            selected = list(self._specs[table]) + list(SYSTEM_COLUMNS)

        statement = select(*[target.c[f] for f in selected])
        clauses = self._where_clauses(table, where)
        if clauses:
            statement = statement.where(*clauses)
        statement = statement.order_by(*self._order_clauses(table, order_by))

        with self._read_guard(), engine.connect() as conn:
            return [dict(row) for row in conn.execute(statement).mappings()]

    def count(self, table: str, where: Optional[Mapping[str, Any]] = None) -> int:
        engine = self._require_engine()
        target = self._table(table)
        statement = select(func.count()).select_from(target)
        clauses = self._where_clauses(table, where)
        if clauses:
            statement = statement.where(*clauses)
        with self._read_guard(), engine.connect() as conn:
            return int(conn.execute(statement).scalar_one())

    def agency_keys(self) -> List[str]:
        """Agency keys with at least one row in any table, sorted."""
        engine = self._require_engine()
        keys = set()
        with self._read_guard(), engine.connect() as conn:
            for table_name in self._specs:
                table = self._metadata.tables[table_name]
                keys.update(conn.execute(select(table.c.agency_key).distinct()).scalars())
        return sorted(keys)


__all__ = [
    "ASC",
    "DESC",
    "GTFSStore",
]
