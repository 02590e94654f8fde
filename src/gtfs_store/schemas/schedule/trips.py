"""
Trips Table Schema
=================

Schema for the trips GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Trips(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for trips data.
    Table-specific field definitions with proper validation.
    """

    # Trip identification
    route_id:				Series[str]				= pa.Field(nullable=False, description="Route this trip belongs to")
    service_id:				Series[str]				= pa.Field(nullable=False, description="Service dates this trip runs on")
    trip_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the trip")

    # Trip information
    trip_headsign:			Series[str]				= pa.Field(nullable=True,  description="Text that appears on signage identifying the trip's destination")
    trip_short_name:		Series[str]				= pa.Field(nullable=True,  description="Public facing text used to identify the trip")
    direction_id:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Direction of travel (0=outbound, 1=inbound)")
    block_id:				Series[str]				= pa.Field(nullable=True,  description="Block the trip belongs to")
    shape_id:				Series[str]				= pa.Field(nullable=True,  description="Shape describing the vehicle travel path")

    # Accessibility
    wheelchair_accessible:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2], description="Wheelchair accessibility (0=unknown, 1=yes, 2=no)")
    bikes_allowed:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2], description="Bikes allowed (0=unknown, 1=yes, 2=no)")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Trips._description = "Trips for each route from GTFS schedule feeds"
Trips._required = True
Trips._primary_key = ['trip_id']
Trips._indexes = ['route_id', 'service_id', 'shape_id', 'block_id']

__all__ = [
    'Trips'
]
