"""
Fare Rules Table Schema
======================

Schema for the fare_rules GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class FareRules(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for fare rules data.
    Table-specific field definitions with proper validation.
    """

    # Fare rule details
    fare_id:				Series[str]				= pa.Field(nullable=False, description="Fare class this rule applies to")
    route_id:				Series[str]				= pa.Field(nullable=True,  description="Route associated with the fare class")
    origin_id:				Series[str]				= pa.Field(nullable=True,  description="Origin zone")
    destination_id:			Series[str]				= pa.Field(nullable=True,  description="Destination zone")
    contains_id:			Series[str]				= pa.Field(nullable=True,  description="Zones a rider will enter while using the fare class")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
FareRules._description = "Rules for applying fares to itineraries"
FareRules._indexes = ['fare_id', 'route_id']

__all__ = [
    'FareRules'
]
