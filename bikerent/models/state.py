"""
Application State
---------------------------

The whole of the application's data as a single immutable value.
Changes are made by building a new state with :func:`attr.evolve`
and committing it through the :class:`~bikerent.service.manager.state_manager.StateManager`.
"""

from typing import Tuple, Optional

from attr import dataclass, attrib

from .bike import Bike
from .issue import Issue
from .notification import Notification
from .parking_zone import ParkingZone
from .rental import Rental
from .user import User


def _collection():
    return attrib(factory=tuple, converter=tuple)


@dataclass(frozen=True)
class AppState:
    users: Tuple[User, ...] = _collection()
    bikes: Tuple[Bike, ...] = _collection()
    parking_zones: Tuple[ParkingZone, ...] = _collection()
    rentals: Tuple[Rental, ...] = _collection()
    notifications: Tuple[Notification, ...] = _collection()
    issues: Tuple[Issue, ...] = _collection()
    current_user_id: Optional[str] = None
