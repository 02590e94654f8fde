"""
Stops Table Schema
=================

Schema for the stops GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Stops(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for stops data.
    Coordinates are not range-checked here; GeoJSON output skips invalid points instead.
    """

    # Stop identification
    stop_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the stop")
    stop_code:				Series[str]				= pa.Field(nullable=True,  description="Short text or number that identifies the stop")

    # Stop information
    stop_name:				Series[str]				= pa.Field(nullable=True,  description="Name of the stop")
    tts_stop_name:			Series[str]				= pa.Field(nullable=True,  description="Readable version of stop_name for text-to-speech")
    stop_desc:				Series[str]				= pa.Field(nullable=True,  description="Description of the stop")
    stop_lat:				Series[float]			= pa.Field(nullable=True,  description="Latitude of the stop")
    stop_lon:				Series[float]			= pa.Field(nullable=True,  description="Longitude of the stop")

    # Stop attributes
    zone_id:				Series[str]				= pa.Field(nullable=True,  description="Fare zone identifier for the stop")
    stop_url:				Series[str]				= pa.Field(nullable=True,  description="URL of a web page about the stop")
    location_type:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2, 3, 4], description="Type of location (0=stop, 1=station, 2=entrance, 3=generic, 4=boarding area)")
    parent_station:			Series[str]				= pa.Field(nullable=True,  description="Identifier of the parent station")
    stop_timezone:			Series[str]				= pa.Field(nullable=True,  description="Timezone of the stop")
    wheelchair_boarding:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2], description="Wheelchair boarding availability (0=unknown, 1=yes, 2=no)")
    level_id:				Series[str]				= pa.Field(nullable=True,  description="Level of the location")
    platform_code:			Series[str]				= pa.Field(nullable=True,  description="Platform identifier for the stop")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Stops._description = "Stop and station information from GTFS schedule feeds"
Stops._required = True
Stops._primary_key = ['stop_id']
Stops._indexes = ['parent_station', 'level_id']

__all__ = [
    'Stops'
]
