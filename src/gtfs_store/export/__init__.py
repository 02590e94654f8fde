"""Export writer: stored agency datasets back to GTFS CSV files."""

from .export_writer import ExportSummary, export_agency, export_gtfs

__all__ = [
    "ExportSummary",
    "export_agency",
    "export_gtfs",
]
