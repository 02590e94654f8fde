"""
Error Types
===========

Exceptions raised by the GTFS store. Every fatal error derives from
``GTFSStoreError`` so callers can translate them with a single handler.
``MalformedRowError`` is the exception to the rule: the loader collects
instances as warnings and returns them with the import summary.
"""

from typing import Any, Optional, Sequence


class GTFSStoreError(Exception):
    """Base class for all GTFS store errors."""


class ConfigError(GTFSStoreError):
    """Configuration file or values are invalid."""


class FeedSourceError(GTFSStoreError):
    """Feed path does not exist or cannot be read."""


class UnknownTableError(GTFSStoreError):
    def __init__(self, table: str):
        self.table = table
        super().__init__(f"Unknown GTFS table: {table}")


class UnknownFieldError(GTFSStoreError):
    def __init__(self, table: str, field: str):
        self.table = table
        self.field = field
        super().__init__(f"Unknown field '{field}' for table {table}")


class MissingRequiredTableError(GTFSStoreError):
    def __init__(self, table: str, source: Optional[str] = None):
        self.table = table
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Required GTFS table '{table}' is missing{where}")


class DuplicateKeyError(GTFSStoreError):
    def __init__(self, table: str, key_columns: Sequence[str], key: Sequence[Any], count: int = 2):
        self.table = table
        self.key_columns = list(key_columns)
        self.key = tuple(key)
        self.count = count
        key_repr = ", ".join(f"{c}={v!r}" for c, v in zip(self.key_columns, self.key))
        super().__init__(f"Duplicate primary key in {table}: {key_repr} ({count} rows)")


class MalformedRowError(GTFSStoreError):
    """A row dropped during import. Reported as a warning, never raised by the loader."""

    def __init__(self, table: str, line: Optional[int], column: Optional[str], value: Any, reason: str):
        self.table = table
        self.line = line
        self.column = column
        self.value = value
        self.reason = reason
        super().__init__(f"{table} line {line}: column {column}={value!r} {reason}")

    def to_dict(self) -> dict:
        return {
            "table": self.table,
            "line": self.line,
            "column": self.column,
            "value": self.value,
            "reason": self.reason,
        }


class AlreadyOpenError(GTFSStoreError):
    """Store is already open."""


class NotOpenError(GTFSStoreError):
    """Store has not been opened, or has been closed."""


class ExportError(GTFSStoreError):
    """Agency key is unknown or the destination cannot be written."""


__all__ = [
    "GTFSStoreError",
    "ConfigError",
    "FeedSourceError",
    "UnknownTableError",
    "UnknownFieldError",
    "MissingRequiredTableError",
    "DuplicateKeyError",
    "MalformedRowError",
    "AlreadyOpenError",
    "NotOpenError",
    "ExportError",
]
