"""
Timetable Stop Order Table Schema
================================

Schema for the non-standard timetable_stop_order.txt table.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class TimetableStopOrder(AgencyKeyMixin, pa.DataFrameModel):

    timetable_id:			Series[str]				= pa.Field(nullable=False, description="Timetable the stop order applies to")
    stop_id:				Series[str]				= pa.Field(nullable=False, description="Stop shown on the timetable")
    stop_sequence:			Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Order of the stop on the timetable")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
TimetableStopOrder._description = "Stop ordering for printed timetables (non-standard extension)"
TimetableStopOrder._indexes = ['timetable_id']

__all__ = [
    'TimetableStopOrder'
]
