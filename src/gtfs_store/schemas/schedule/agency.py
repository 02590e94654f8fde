"""
Agency Table Schema
==================

Schema for the agency GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Agency(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for agency data.
    Table-specific field definitions with proper validation.
    """

    # Agency identification
    agency_id:				Series[str]				= pa.Field(nullable=True,  description="Unique identifier for the agency (required with multiple agencies)")
    agency_name:			Series[str]				= pa.Field(nullable=False, description="Full name of the transit agency")
    agency_url:				Series[str]				= pa.Field(nullable=False, description="URL of the transit agency")
    agency_timezone:		Series[str]				= pa.Field(nullable=False, description="Timezone where the agency is located")

    # Agency contact details
    agency_lang:			Series[str]				= pa.Field(nullable=True,  description="Primary language used by this agency")
    agency_phone:			Series[str]				= pa.Field(nullable=True,  description="Voice telephone number for the agency")
    agency_fare_url:		Series[str]				= pa.Field(nullable=True,  description="URL of a web page to purchase tickets")
    agency_email:			Series[str]				= pa.Field(nullable=True,  description="Customer service email address")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Agency._description = "Transit agencies with service represented in the feed"
Agency._required = True
Agency._primary_key = ['agency_id']

__all__ = [
    'Agency'
]
