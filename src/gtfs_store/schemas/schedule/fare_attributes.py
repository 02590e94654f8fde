"""
Fare Attributes Table Schema
===========================

Schema for the fare_attributes GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class FareAttributes(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for fare attributes data.
    An empty ``transfers`` value means unlimited transfers, so it stays nullable.
    """

    # Fare identification
    fare_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the fare class")
    price:					Series[float]			= pa.Field(nullable=False, ge=0, description="Fare price in the unit of currency_type")
    currency_type:			Series[str]				= pa.Field(nullable=False, description="ISO 4217 currency code")

    # Fare rules
    payment_method:			Series[pd.Int64Dtype]	= pa.Field(nullable=False, isin=[0, 1], description="When the fare must be paid (0=on board, 1=before boarding)")
    transfers:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1, 2], description="Number of transfers permitted on this fare (empty=unlimited)")
    agency_id:				Series[str]				= pa.Field(nullable=True,  description="Agency for the fare")
    transfer_duration:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Length of time in seconds before a transfer expires")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
FareAttributes._description = "Fare information for a transit agency's routes"
FareAttributes._primary_key = ['fare_id']

__all__ = [
    'FareAttributes'
]
