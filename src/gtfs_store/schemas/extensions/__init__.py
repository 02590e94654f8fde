"""
Extension Table Schemas
=======================

Non-standard tables recognised alongside GTFS Schedule: direction names,
stop attributes and the printed-timetable tables.
"""

from .directions import Directions
from .stop_attributes import StopAttributes
from .timetables import Timetables
from .timetable_pages import TimetablePages
from .timetable_stop_order import TimetableStopOrder
from .timetable_notes import TimetableNotes
from .timetable_notes_references import TimetableNotesReferences

__all__ = [
    'Directions',
    'StopAttributes',
    'Timetables',
    'TimetablePages',
    'TimetableStopOrder',
    'TimetableNotes',
    'TimetableNotesReferences'
]
