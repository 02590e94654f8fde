"""
Attributions Table Schema
========================

Schema for the attributions GTFS Schedule table.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Attributions(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for attributions data.
    """

    # Attribution scope
    attribution_id:			Series[str]				= pa.Field(nullable=True,  description="Identifies an attribution for the dataset or a subset of it")
    agency_id:				Series[str]				= pa.Field(nullable=True,  description="Agency to which the attribution applies")
    route_id:				Series[str]				= pa.Field(nullable=True,  description="Route to which the attribution applies")
    trip_id:				Series[str]				= pa.Field(nullable=True,  description="Trip to which the attribution applies")

    # Organization
    organization_name:		Series[str]				= pa.Field(nullable=False, description="Name of the organization that the dataset is attributed to")
    is_producer:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Organization is a producer of the dataset")
    is_operator:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Organization is an operator of the service")
    is_authority:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Organization is an authority for the service")
    attribution_url:		Series[str]				= pa.Field(nullable=True,  description="URL of the organization")
    attribution_email:		Series[str]				= pa.Field(nullable=True,  description="Email of the organization")
    attribution_phone:		Series[str]				= pa.Field(nullable=True,  description="Phone number of the organization")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Attributions._description = "Organizations the dataset is attributed to"

__all__ = [
    'Attributions'
]
