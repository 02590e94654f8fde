"""
Pathways Table Schema
====================

Schema for the pathways GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Pathways(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for pathways data.
    Table-specific field definitions with proper validation.
    """

    # Pathway identification
    pathway_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the pathway")
    from_stop_id:			Series[str]				= pa.Field(nullable=False, description="Location at which the pathway begins")
    to_stop_id:				Series[str]				= pa.Field(nullable=False, description="Location at which the pathway ends")

    # Pathway attributes
    pathway_mode:			Series[pd.Int64Dtype]	= pa.Field(nullable=False, isin=[1, 2, 3, 4, 5, 6, 7], description="Type of pathway (1=walkway, 2=stairs, ... 7=exit gate)")
    is_bidirectional:		Series[pd.Int64Dtype]	= pa.Field(nullable=False, isin=[0, 1], description="Direction the pathway can be used in")
    length:					Series[float]			= pa.Field(nullable=True,  ge=0, description="Horizontal length in meters")
    traversal_time:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Average time in seconds to walk the pathway")
    stair_count:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  description="Number of stairs of the pathway")
    max_slope:				Series[float]			= pa.Field(nullable=True,  description="Maximum slope ratio of the pathway")
    min_width:				Series[float]			= pa.Field(nullable=True,  ge=0, description="Minimum width of the pathway in meters")

    # Signage
    signposted_as:			Series[str]				= pa.Field(nullable=True,  description="Signage text visible to riders")
    reversed_signposted_as:	Series[str]				= pa.Field(nullable=True,  description="Signage text when used in reverse")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Pathways._description = "Pathways linking together locations within stations"
Pathways._primary_key = ['pathway_id']
Pathways._indexes = ['from_stop_id', 'to_stop_id']

__all__ = [
    'Pathways'
]
