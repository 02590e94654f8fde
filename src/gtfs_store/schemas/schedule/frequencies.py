"""
Frequencies Table Schema
=======================

Schema for the frequencies GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin

# Columns holding GTFS times (HH:MM:SS) stored as seconds
COLS_TIME = ['start_time', 'end_time']


class Frequencies(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for frequencies data.
    Table-specific field definitions with proper validation.
    """

    # Frequency identification
    trip_id:				Series[str]				= pa.Field(nullable=False, description="Trip to which the specified headway of service applies")
    start_time:				Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Time at which the first vehicle departs (seconds since midnight)")
    end_time:				Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Time at which service changes (seconds since midnight)")

    # Headway information
    headway_secs:			Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Time between departures from the same stop, in seconds")
    exact_times:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Frequency-based (0) or schedule-based (1) trips")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Frequencies._description = "Headway-based service for GTFS schedule feeds"
Frequencies._primary_key = ['trip_id', 'start_time']
Frequencies._indexes = ['trip_id']

__all__ = [
    'Frequencies',
    'COLS_TIME',
]
