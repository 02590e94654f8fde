"""
Routes Table Schema
==================

Schema for the routes GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Routes(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for routes data.
    Table-specific field definitions with proper validation.
    """

    # Route identification
    route_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the route")
    agency_id:				Series[str]				= pa.Field(nullable=True,  description="Agency identifier this route belongs to")

    # Route names and descriptions
    route_short_name:		Series[str]				= pa.Field(nullable=True,  description="Short name of the route")
    route_long_name:		Series[str]				= pa.Field(nullable=True,  description="Full name of the route")
    route_desc:				Series[str]				= pa.Field(nullable=True,  description="Description of the route")
    route_type:				Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Type of transportation used on the route")

    # Route presentation
    route_url:				Series[str]				= pa.Field(nullable=True,  description="URL of a web page about the route")
    route_color:			Series[str]				= pa.Field(nullable=True,  description="Route color designation (hex color)")
    route_text_color:		Series[str]				= pa.Field(nullable=True,  description="Route text color designation (hex color)")
    route_sort_order:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Order for sorting routes in lists")

    # Pickup/drop-off behavior
    continuous_pickup:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2, 3], description="Continuous pickup behavior along the route")
    continuous_drop_off:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2, 3], description="Continuous drop-off behavior along the route")
    network_id:				Series[str]				= pa.Field(nullable=True,  description="Group of routes this route belongs to")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Routes._description = "Route information from GTFS schedule feeds"
Routes._required = True
Routes._primary_key = ['route_id']
Routes._indexes = ['agency_id']

__all__ = [
    'Routes'
]
