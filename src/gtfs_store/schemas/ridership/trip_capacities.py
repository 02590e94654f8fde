"""
Trip Capacities Table Schema
===========================

Schema for the GTFS-ride trip_capacity.txt table.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class TripCapacities(AgencyKeyMixin, pa.DataFrameModel):

    agency_id:				Series[str]				= pa.Field(nullable=True,  description="Agency operating the trip")
    trip_id:				Series[str]				= pa.Field(nullable=True,  description="Trip the capacity applies to")
    service_date:			Series[pd.Timestamp]	= pa.Field(nullable=True,  description="Service date the capacity applies to")
    vehicle_description:	Series[str]				= pa.Field(nullable=True,  description="Description of the vehicle")
    seated_capacity:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Number of seats")
    standing_capacity:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Number of standing places")
    wheelchair_capacity:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Number of wheelchair places")
    bike_capacity:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Number of bike places")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
TripCapacities._filename = "trip_capacity.txt"
TripCapacities._description = "Vehicle capacity per trip (GTFS-ride)"
TripCapacities._indexes = ['trip_id']

__all__ = [
    'TripCapacities'
]
