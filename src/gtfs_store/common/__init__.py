"""Shared utilities: logging, configuration, errors and GTFS value encodings."""
