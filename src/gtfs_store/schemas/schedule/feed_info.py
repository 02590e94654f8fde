"""
Feed Info Table Schema
=====================

Schema for the feed_info GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class FeedInfo(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for feed info data.
    Table-specific field definitions with proper validation.
    """

    # Publisher information
    feed_publisher_name:	Series[str]				= pa.Field(nullable=False, description="Full name of the organization that publishes the feed")
    feed_publisher_url:		Series[str]				= pa.Field(nullable=False, description="URL of the feed publishing organization's website")
    feed_lang:				Series[str]				= pa.Field(nullable=False, description="Default language used for the text in this feed")
    default_lang:			Series[str]				= pa.Field(nullable=True,  description="Language to use when the rider's language is unknown")

    # Feed validity
    feed_start_date:		Series[pd.Timestamp]	= pa.Field(nullable=True,  description="First day of the service period covered by the feed")
    feed_end_date:			Series[pd.Timestamp]	= pa.Field(nullable=True,  description="Last day of the service period covered by the feed")
    feed_version:			Series[str]				= pa.Field(nullable=True,  description="Current version of the GTFS dataset")

    # Contact information
    feed_contact_email:		Series[str]				= pa.Field(nullable=True,  description="Email address for communication regarding the dataset")
    feed_contact_url:		Series[str]				= pa.Field(nullable=True,  description="URL for contact information about the dataset")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
FeedInfo._description = "Dataset metadata, including publisher, version, and expiration"

__all__ = [
    'FeedInfo'
]
