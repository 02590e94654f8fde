"""Process-wide default store handle used when callers do not pass ``store=``."""

import threading
from typing import Optional

from gtfs_store.common.errors import AlreadyOpenError, NotOpenError
from gtfs_store.store.database import GTFSStore

_default_store: Optional[GTFSStore] = None
_handle_lock = threading.Lock()


def open_store(sqlite_path: Optional[str] = None) -> GTFSStore:
    """
    Open the default store.

    Args:
        sqlite_path: Database file, or None for an in-memory database

    Raises:
        AlreadyOpenError: If a default store is already open
    """
    global _default_store
    with _handle_lock:
        if _default_store is not None:
            raise AlreadyOpenError(f"A store is already open: {_default_store!r}")
        _default_store = GTFSStore(sqlite_path).open()
        return _default_store


def close_store() -> None:
    """Close the default store. Raises NotOpenError when none is open."""
    global _default_store
    with _handle_lock:
        if _default_store is None:
            raise NotOpenError("No store is open")
        store, _default_store = _default_store, None
    store.close()


def get_store() -> GTFSStore:
    with _handle_lock:
        if _default_store is None:
            raise NotOpenError("No store is open; call open_store() first")
        return _default_store


def is_store_open() -> bool:
    return _default_store is not None


def resolve_store(store: Optional[GTFSStore] = None) -> GTFSStore:
    """Return ``store`` when given, otherwise the default store."""
    return store if store is not None else get_store()


__all__ = [
    "open_store",
    "close_store",
    "get_store",
    "is_store_open",
    "resolve_store",
]
