"""Relational store: SQLite tables for every registered GTFS table."""

from .database import ASC, DESC, GTFSStore
from .lifecycle import close_store, get_store, is_store_open, open_store, resolve_store

__all__ = [
    "ASC",
    "DESC",
    "GTFSStore",
    "close_store",
    "get_store",
    "is_store_open",
    "open_store",
    "resolve_store",
]
