"""
Common Columns Mixins
=====================

Defines shared Pandera columns to be mixed into DataFrameModel schemas,
and the semantic column types the store works with.
"""

import pandera.pandas as pa
from pandera.typing import Series


class AgencyKeyMixin(pa.DataFrameModel):
    """
    Mixin that tags every row with the agency dataset it was imported into.

    - agency_key: key of the import that produced the row
    """

    agency_key: Series[str] = pa.Field(nullable=False, description="Agency dataset this row belongs to")

    class Config:
        strict = False
        coerce = True


# Columns owned by the store rather than the GTFS feed
SYSTEM_COLUMNS = ["agency_key"]

# Semantic column types
STRING = "string"
INTEGER = "integer"
FLOAT = "float"
DATE = "date"
TIME = "time"  # GTFS H:MM:SS held as seconds since service-day midnight

__all__ = [
    "AgencyKeyMixin",
    "SYSTEM_COLUMNS",
    "STRING",
    "INTEGER",
    "FLOAT",
    "DATE",
    "TIME",
]
