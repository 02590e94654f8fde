"""
Timetables Table Schema
======================

Schema for the non-standard timetables.txt table used to build printed timetables.
A timetable_id may repeat across rows (one row per route/direction/period).
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin

# Columns holding GTFS times (HH:MM:SS) stored as seconds
COLS_TIME = ['start_time', 'end_time']


class Timetables(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for timetables data.
    """

    # Timetable identification
    timetable_id:			Series[str]				= pa.Field(nullable=False, description="Identifier of the timetable")
    route_id:				Series[str]				= pa.Field(nullable=True,  description="Route the timetable covers")
    direction_id:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Direction covered by the timetable")

    # Service period
    start_date:				Series[pd.Timestamp]	= pa.Field(nullable=True,  description="First date of the timetable")
    end_date:				Series[pd.Timestamp]	= pa.Field(nullable=True,  description="Last date of the timetable")
    monday:					Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Timetable includes Mondays")
    tuesday:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Timetable includes Tuesdays")
    wednesday:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Timetable includes Wednesdays")
    thursday:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Timetable includes Thursdays")
    friday:					Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Timetable includes Fridays")
    saturday:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Timetable includes Saturdays")
    sunday:					Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Timetable includes Sundays")
    start_time:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Earliest trip start time (seconds since midnight)")
    end_time:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Latest trip start time (seconds since midnight)")

    # Presentation
    timetable_label:		Series[str]				= pa.Field(nullable=True,  description="Label shown at the top of the timetable")
    service_notes:			Series[str]				= pa.Field(nullable=True,  description="Notes shown below the timetable label")
    orientation:			Series[str]				= pa.Field(nullable=True,  description="Layout orientation (vertical, horizontal, hourly)")
    timetable_page_id:		Series[str]				= pa.Field(nullable=True,  description="Page the timetable is printed on")
    timetable_sequence:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Order of the timetable within its page")
    direction_name:			Series[str]				= pa.Field(nullable=True,  description="Direction name shown on the timetable")
    include_exceptions:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Include calendar_dates exceptions")
    show_trip_continuation:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[0, 1], description="Show trips continuing from or to another route")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Timetables._description = "Printed timetable definitions (non-standard extension)"
Timetables._indexes = ['timetable_id', 'timetable_page_id', 'route_id']

__all__ = [
    'Timetables',
    'COLS_TIME',
]
