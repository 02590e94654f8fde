"""
Board Alights Table Schema
=========================

Schema for the GTFS-ride board_alight.txt table (boardings and alightings per stop visit).
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin

# Columns holding GTFS times (HH:MM:SS) stored as seconds
COLS_TIME = ['service_arrival_time', 'service_departure_time']


class BoardAlights(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for board/alight counts.
    """

    # Stop visit
    trip_id:				Series[str]				= pa.Field(nullable=False, description="Trip the counts were recorded on")
    stop_id:				Series[str]				= pa.Field(nullable=False, description="Stop the counts were recorded at")
    stop_sequence:			Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Order of the stop within the trip")
    record_use:				Series[pd.Int64Dtype]	= pa.Field(nullable=False, isin=[0, 1], description="Counts are complete (0) or only load data (1)")
    schedule_relationship:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2, 3, 4, 5, 6, 7, 8], description="Relationship of the stop visit to the schedule")

    # Counts
    boardings:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Number of boardings")
    alightings:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Number of alightings")
    current_load:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Passengers on board after the stop")
    load_count:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Passenger load counted at the stop")
    load_type:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Load counted before (0) or after (1) the stop")
    rack_down:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Bike rack was deployed")
    bike_boardings:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Bikes boarded")
    bike_alightings:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Bikes alighted")
    ramp_used:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Ramp was deployed")
    ramp_boardings:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Boardings using the ramp")
    ramp_alightings:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Alightings using the ramp")

    # Observation
    service_date:			Series[pd.Timestamp]	= pa.Field(nullable=True,  description="Service date of the trip")
    service_arrival_time:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Observed arrival time (seconds since midnight)")
    service_departure_time:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Observed departure time (seconds since midnight)")
    source:					Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2, 3, 4], description="Collection method of the counts")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
BoardAlights._filename = "board_alight.txt"
BoardAlights._description = "Boarding and alighting counts (GTFS-ride)"
BoardAlights._indexes = ['trip_id', 'stop_id']

__all__ = [
    'BoardAlights',
    'COLS_TIME',
]
