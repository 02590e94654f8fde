"""
Stop Attributes Table Schema
===========================

Schema for the non-standard stop_attributes.txt table.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class StopAttributes(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for stop attributes data.
    """

    stop_id:				Series[str]				= pa.Field(nullable=False, description="Stop the attributes apply to")
    accessibility_id:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  description="Accessibility classification of the stop")
    cardinal_direction:		Series[str]				= pa.Field(nullable=True,  description="Cardinal direction of travel at the stop")
    relative_position:		Series[str]				= pa.Field(nullable=True,  description="Position of the stop relative to the intersection")
    stop_city:				Series[str]				= pa.Field(nullable=True,  description="City the stop is located in")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
StopAttributes._description = "Additional stop details (non-standard extension)"
StopAttributes._primary_key = ['stop_id']

__all__ = [
    'StopAttributes'
]
