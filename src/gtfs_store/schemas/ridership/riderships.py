"""
Riderships Table Schema
======================

Schema for the GTFS-ride ridership.txt table (aggregated ridership).
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin

# Columns holding GTFS times (HH:MM:SS) stored as seconds
COLS_TIME = ['ridership_start_time', 'ridership_end_time']


class Riderships(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for aggregated ridership data.
    """

    # Totals
    total_boardings:		Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Total boardings in the period")
    total_alightings:		Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Total alightings in the period")

    # Period
    ridership_start_date:	Series[pd.Timestamp]	= pa.Field(nullable=False, description="First date of the aggregation period")
    ridership_end_date:		Series[pd.Timestamp]	= pa.Field(nullable=False, description="Last date of the aggregation period")
    ridership_start_time:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Start of the time window (seconds since midnight)")
    ridership_end_time:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="End of the time window (seconds since midnight)")
    service_id:				Series[str]				= pa.Field(nullable=True,  description="Service the aggregation applies to")
    monday:					Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Aggregation includes Mondays")
    tuesday:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Aggregation includes Tuesdays")
    wednesday:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Aggregation includes Wednesdays")
    thursday:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Aggregation includes Thursdays")
    friday:					Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Aggregation includes Fridays")
    saturday:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Aggregation includes Saturdays")
    sunday:					Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Aggregation includes Sundays")

    # Scope
    agency_id:				Series[str]				= pa.Field(nullable=True,  description="Agency the aggregation applies to")
    route_id:				Series[str]				= pa.Field(nullable=True,  description="Route the aggregation applies to")
    direction_id:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Direction the aggregation applies to")
    trip_id:				Series[str]				= pa.Field(nullable=True,  description="Trip the aggregation applies to")
    stop_id:				Series[str]				= pa.Field(nullable=True,  description="Stop the aggregation applies to")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Riderships._filename = "ridership.txt"
Riderships._description = "Aggregated ridership totals (GTFS-ride)"
Riderships._indexes = ['route_id', 'stop_id']

__all__ = [
    'Riderships',
    'COLS_TIME',
]
