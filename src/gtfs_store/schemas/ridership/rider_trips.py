"""
Rider Trips Table Schema
=======================

Schema for the GTFS-ride rider_trip.txt table (individual rider journeys).
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin

# Columns holding GTFS times (HH:MM:SS) stored as seconds
COLS_TIME = ['boarding_time', 'alighting_time']


class RiderTrips(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for rider trips data.
    """

    # Rider journey
    rider_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the rider journey")
    agency_id:				Series[str]				= pa.Field(nullable=True,  description="Agency operating the trip")
    trip_id:				Series[str]				= pa.Field(nullable=True,  description="Trip taken")
    boarding_stop_id:		Series[str]				= pa.Field(nullable=True,  description="Stop where the rider boarded")
    boarding_stop_sequence:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Stop sequence of the boarding")
    alighting_stop_id:		Series[str]				= pa.Field(nullable=True,  description="Stop where the rider alighted")
    alighting_stop_sequence:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Stop sequence of the alighting")
    service_date:			Series[pd.Timestamp]	= pa.Field(nullable=True,  description="Service date of the trip")
    boarding_time:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Boarding time (seconds since midnight)")
    alighting_time:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Alighting time (seconds since midnight)")

    # Rider and fare
    rider_type:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  description="Rider category")
    rider_type_description:	Series[str]				= pa.Field(nullable=True,  description="Description of the rider category")
    fare_paid:				Series[float]			= pa.Field(nullable=True,  ge=0, description="Fare paid by the rider")
    transaction_type:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  description="Type of fare transaction")
    fare_media:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  description="Fare media used")
    accompanying_device:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  description="Device accompanying the rider")
    transfer_status:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  description="Whether the journey was a transfer")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
RiderTrips._filename = "rider_trip.txt"
RiderTrips._description = "Individual rider journeys (GTFS-ride)"
RiderTrips._primary_key = ['rider_id']
RiderTrips._indexes = ['trip_id']

__all__ = [
    'RiderTrips',
    'COLS_TIME',
]
