"""
Stop Times Table Schema
======================

Schema for the stop_times GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.

Arrival and departure times are stored as seconds since service-day
midnight, so 25:10:00 is 90600 rather than 01:10:00.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin

# Columns holding GTFS times (HH:MM:SS) stored as seconds
COLS_TIME = ['arrival_time', 'departure_time']


class StopTimes(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for stop times data.
    Table-specific field definitions with proper validation.
    """

    # Trip and stop identification
    trip_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the trip")
    arrival_time:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Arrival time at the stop (seconds since midnight)")
    departure_time:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Departure time from the stop (seconds since midnight)")
    stop_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the stop")
    stop_sequence:			Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Order of stops for this trip")

    # Stop attributes
    stop_headsign:			Series[str]				= pa.Field(nullable=True,  description="Text that appears on signage identifying the trip's destination")
    pickup_type:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2, 3], description="Indicates pickup method (0=regular, 1=no pickup, 2=must phone, 3=must coordinate)")
    drop_off_type:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2, 3], description="Indicates drop off method (0=regular, 1=no drop off, 2=must phone, 3=must coordinate)")
    continuous_pickup:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2, 3], description="Continuous pickup behavior from this stop")
    continuous_drop_off:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2, 3], description="Continuous drop-off behavior from this stop")

    # Shape information
    shape_dist_traveled:	Series[float]			= pa.Field(nullable=True,  ge=0, description="Distance traveled along the shape from the first stop")
    timepoint:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Indicates if arrival/departure times are exact (0=approximate, 1=exact)")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
StopTimes._description = "Stop times and sequences for GTFS schedule feeds"
StopTimes._required = True
StopTimes._primary_key = ['trip_id', 'stop_sequence']
StopTimes._indexes = ['trip_id', 'stop_id']

__all__ = [
    'StopTimes',
    'COLS_TIME',
]
