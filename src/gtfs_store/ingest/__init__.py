"""Feed ingestion: read GTFS directories and archives into the store."""

from .feed_loader import ImportSummary, import_feed, import_gtfs

__all__ = [
    "ImportSummary",
    "import_feed",
    "import_gtfs",
]
