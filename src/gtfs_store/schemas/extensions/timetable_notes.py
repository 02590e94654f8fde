"""
Timetable Notes Table Schema
===========================

Schema for the non-standard timetable_notes.txt table.
"""

import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class TimetableNotes(AgencyKeyMixin, pa.DataFrameModel):

    note_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the note")
    symbol:					Series[str]				= pa.Field(nullable=True,  description="Symbol used to reference the note")
    note:					Series[str]				= pa.Field(nullable=False, description="Text of the note")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
TimetableNotes._description = "Footnotes shown on printed timetables (non-standard extension)"
TimetableNotes._primary_key = ['note_id']

__all__ = [
    'TimetableNotes'
]
