"""
Timetable Notes References Table Schema
======================================

Schema for the non-standard timetable_notes_references.txt table.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class TimetableNotesReferences(AgencyKeyMixin, pa.DataFrameModel):

    note_id:				Series[str]				= pa.Field(nullable=False, description="Note being referenced")
    timetable_id:			Series[str]				= pa.Field(nullable=True,  description="Timetable the note is shown on")
    route_id:				Series[str]				= pa.Field(nullable=True,  description="Route the note applies to")
    trip_id:				Series[str]				= pa.Field(nullable=True,  description="Trip the note applies to")
    stop_id:				Series[str]				= pa.Field(nullable=True,  description="Stop the note applies to")
    stop_sequence:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Stop sequence the note applies to")
    show_on_stoptime:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Show the symbol next to the stop time")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
TimetableNotesReferences._description = "Placement of timetable notes (non-standard extension)"
TimetableNotesReferences._indexes = ['note_id', 'timetable_id']

__all__ = [
    'TimetableNotesReferences'
]
