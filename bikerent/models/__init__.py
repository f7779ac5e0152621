"""
The models package contains all the records the rental engine works with.
Every record is immutable; a change produces a new record.
"""

from .bike import Bike
from .issue import Issue
from .location import Location
from .notification import Notification
from .parking_zone import ParkingZone
from .rental import Rental
from .state import AppState
from .user import User
from .util import BikeType, BikeStatus, RentalStatus, IssueStatus
