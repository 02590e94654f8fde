"""
Timetable Pages Table Schema
===========================

Schema for the non-standard timetable_pages.txt table.
"""

import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class TimetablePages(AgencyKeyMixin, pa.DataFrameModel):

    timetable_page_id:		Series[str]				= pa.Field(nullable=False, description="Unique identifier for the timetable page")
    timetable_page_label:	Series[str]				= pa.Field(nullable=True,  description="Label of the timetable page")
    filename:				Series[str]				= pa.Field(nullable=True,  description="Filename to use for the generated page")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
TimetablePages._description = "Groups of timetables printed together (non-standard extension)"
TimetablePages._primary_key = ['timetable_page_id']

__all__ = [
    'TimetablePages'
]
