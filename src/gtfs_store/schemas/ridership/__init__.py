"""
Ridership Table Schemas
=======================

GTFS-ride tables describing passenger counts and vehicle capacity.
"""

from .board_alights import BoardAlights
from .ride_feed_info import RideFeedInfo
from .rider_trips import RiderTrips
from .riderships import Riderships
from .trip_capacities import TripCapacities

__all__ = [
    'BoardAlights',
    'RideFeedInfo',
    'RiderTrips',
    'Riderships',
    'TripCapacities'
]
