"""
Levels Table Schema
==================

Schema for the levels GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Levels(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for levels data.
    Table-specific field definitions with proper validation.
    """

    level_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the level")
    level_index:			Series[float]			= pa.Field(nullable=False, description="Numeric index of the level relative to ground (0)")
    level_name:				Series[str]				= pa.Field(nullable=True,  description="Name of the level as seen by the rider")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Levels._description = "Levels within stations"
Levels._primary_key = ['level_id']

__all__ = [
    'Levels'
]
