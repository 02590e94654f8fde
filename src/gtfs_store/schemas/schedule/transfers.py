"""
Transfers Table Schema
=====================

Schema for the transfers GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Transfers(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for transfers data.
    Table-specific field definitions with proper validation.
    """

    # Transfer endpoints
    from_stop_id:			Series[str]				= pa.Field(nullable=True,  description="Stop where a connection between routes begins")
    to_stop_id:				Series[str]				= pa.Field(nullable=True,  description="Stop where a connection between routes ends")
    from_route_id:			Series[str]				= pa.Field(nullable=True,  description="Route where a connection begins")
    to_route_id:			Series[str]				= pa.Field(nullable=True,  description="Route where a connection ends")
    from_trip_id:			Series[str]				= pa.Field(nullable=True,  description="Trip where a connection begins")
    to_trip_id:				Series[str]				= pa.Field(nullable=True,  description="Trip where a connection ends")

    # Transfer rules
    transfer_type:			Series[pd.Int64Dtype]	= pa.Field(nullable=False, isin=[0, 1, 2, 3, 4, 5], description="Type of connection for the specified pair")
    min_transfer_time:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Minimum time in seconds to transfer")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Transfers._description = "Rules for making connections at transfer points between routes"
Transfers._indexes = ['from_stop_id', 'to_stop_id']

__all__ = [
    'Transfers'
]
