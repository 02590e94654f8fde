"""
Schedule GTFS Table Schemas
===========================

These schemas define the structure of standard GTFS Schedule tables as they exist in the store.
Each schema corresponds to a standard GTFS Schedule table.
"""

from .agency import Agency
from .attributions import Attributions
from .calendar import Calendar
from .calendar_dates import CalendarDates
from .fare_attributes import FareAttributes
from .fare_rules import FareRules
from .feed_info import FeedInfo
from .frequencies import Frequencies
from .levels import Levels
from .pathways import Pathways
from .routes import Routes
from .shapes import Shapes
from .stops import Stops
from .stop_times import StopTimes
from .transfers import Transfers
from .translations import Translations
from .trips import Trips

__all__ = [
    'Agency',
    'Attributions',
    'Calendar',
    'CalendarDates',
    'FareAttributes',
    'FareRules',
    'FeedInfo',
    'Frequencies',
    'Levels',
    'Pathways',
    'Routes',
    'Shapes',
    'Stops',
    'StopTimes',
    'Transfers',
    'Translations',
    'Trips'
]
