"""
Calendar Dates Table Schema
==========================

Schema for the calendar_dates GTFS Schedule table.
Table-specific DataFrameModel definition with proper validation.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class CalendarDates(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for calendar dates data.
    Table-specific field definitions with proper validation.
    """

    # Service exception details
    service_id:				Series[str]				= pa.Field(nullable=False, description="Service identifier this exception applies to")
    date:					Series[pd.Timestamp]	= pa.Field(nullable=False, description="Date of the service exception")
    exception_type:			Series[pd.Int64Dtype]	= pa.Field(nullable=False, isin=[1, 2], description="Type of exception (1=added, 2=removed)")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
CalendarDates._description = "Service exception dates from GTFS schedule feeds"
CalendarDates._primary_key = ['service_id', 'date']
CalendarDates._indexes = ['service_id']

__all__ = [
    'CalendarDates'
]
