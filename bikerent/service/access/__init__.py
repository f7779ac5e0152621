"""
The access layer holds the collections of the application state
and the read and write operations over them. Everything here is a
pure function of its input; committing the results is left to the
managers.
"""

from .bikes import FleetStore, get_bikes, get_bike
from .parking_zones import ParkingZoneIndex, get_zone
from .rentals import RentalLedger, get_rentals, get_rental
from .users import get_user, find_duplicates
