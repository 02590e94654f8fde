"""
Directions Table Schema
======================

Schema for the non-standard directions.txt table (direction names per route).
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Directions(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for directions data.
    """

    route_id:				Series[str]				= pa.Field(nullable=False, description="Route the direction name applies to")
    direction_id:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Direction of travel (0=outbound, 1=inbound)")
    direction:				Series[str]				= pa.Field(nullable=False, description="Human readable direction name")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Directions._description = "Direction names for routes (non-standard extension)"
Directions._primary_key = ['route_id', 'direction_id']

__all__ = [
    'Directions'
]
