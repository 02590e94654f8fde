"""
Shapes Table Schema
==================

Schema for the shapes GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Shapes(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for shapes data.
    Table-specific field definitions with proper validation.
    """

    # Shape identification
    shape_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the shape")

    # Shape point information
    shape_pt_lat:			Series[float]			= pa.Field(nullable=False, description="Latitude of the shape point")
    shape_pt_lon:			Series[float]			= pa.Field(nullable=False, description="Longitude of the shape point")
    shape_pt_sequence:		Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Sequence number of the shape point")

    # Shape attributes
    shape_dist_traveled:	Series[float]			= pa.Field(nullable=True,  ge=0, description="Distance traveled along the shape from the first point")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Shapes._description = "Shape geometry points for GTFS schedule feeds"
Shapes._primary_key = ['shape_id', 'shape_pt_sequence']
Shapes._indexes = ['shape_id']

__all__ = [
    'Shapes'
]
