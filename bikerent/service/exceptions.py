"""
Exceptions
----------

The errors raised by the rental engine. Every one of them is reported
to the immediate caller; none leave the state partially changed.
"""

from typing import Optional

from bikerent.models import ParkingZone, BikeStatus


class RentalError(Exception):
    """The base class of all errors raised by the rental engine."""

    @property
    def message(self) -> str:
        return self.args[0] if self.args else self.__class__.__name__


class NotFoundError(RentalError):
    """Raised when a referenced bike, rental or user does not exist."""


class ConflictError(RentalError):
    """Raised when an operation would break one of the rental invariants."""


class AlreadyActiveError(ConflictError):
    """Raised when a user tries to start a rental while one is active."""

    def __init__(self, rental_id: str):
        super().__init__("You already have an active rental.")
        self.rental_id = rental_id


class BikeUnavailableError(RentalError):
    """Raised when the requested bike is not available to rent."""

    def __init__(self, bike_id: str, status: BikeStatus):
        super().__init__(f"Bike {bike_id} is not available ({status.value}).")
        self.bike_id = bike_id
        self.status = status


class InvalidStateError(RentalError):
    """Raised when closing a rental that is not active."""


class PhotoRequiredError(RentalError):
    """Raised when a rental is ended without a return photo."""

    def __init__(self):
        super().__init__("A return photo is required to end the rental.")


class PhotoStorageError(RentalError):
    """Raised when the return photo could not be stored locally."""


class NotInParkingZoneError(RentalError):
    """
    Raised when a bike is returned outside of every parking zone.
    Carries the closest zone and its distance so the user can be pointed to it.
    """

    def __init__(self, nearest_zone: Optional[ParkingZone], distance: Optional[float]):
        if nearest_zone is None:
            message = "The bike must be returned inside a parking zone, and there are none."
        else:
            message = f"The bike must be returned inside a parking zone. " \
                      f"The nearest is {nearest_zone.name}, {round(distance)}m away."
        super().__init__(message)
        self.nearest_zone = nearest_zone
        self.distance = distance


class SyncError(Exception):
    """Raised when the remote state authority could not be reached or refused a request."""


class StateLoadError(Exception):
    """Raised when the stored state exists but cannot be read."""
