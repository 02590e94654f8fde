"""
Ride Feed Info Table Schema
==========================

Schema for the GTFS-ride ride_feed_info.txt table.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class RideFeedInfo(AgencyKeyMixin, pa.DataFrameModel):

    ride_files:				Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Which GTFS-ride files are included")
    ride_start_date:		Series[pd.Timestamp]	= pa.Field(nullable=True,  description="First date of ridership data")
    ride_end_date:			Series[pd.Timestamp]	= pa.Field(nullable=True,  description="Last date of ridership data")
    gtfs_feed_date:			Series[pd.Timestamp]	= pa.Field(nullable=True,  description="Date of the GTFS feed the ridership refers to")
    default_currency_type:	Series[str]				= pa.Field(nullable=True,  description="Default currency for fares")
    ride_feed_version:		Series[str]				= pa.Field(nullable=True,  description="Version of the ridership feed")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
RideFeedInfo._description = "Ridership feed metadata (GTFS-ride)"

__all__ = [
    'RideFeedInfo'
]
