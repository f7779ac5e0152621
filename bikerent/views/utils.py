"""
Utilities
-------------------------

Maps the errors of the rental engine onto the named
responses the views declare with :func:`~bikerent.serializer.returns`.
"""

from http import HTTPStatus
from typing import Tuple, Dict, Any

from bikerent.serializer import JSendSchema, failure
from bikerent.service.exceptions import (
    RentalError, NotFoundError, ConflictError, BikeUnavailableError, InvalidStateError,
    NotInParkingZoneError,
)

error_responses = {
    "not_found": (JSendSchema(), HTTPStatus.NOT_FOUND),
    "conflict": (JSendSchema(), HTTPStatus.CONFLICT),
    "bad_request": (JSendSchema(), HTTPStatus.BAD_REQUEST),
}
"""The named responses of every view that calls into the rental engine."""


def fail(error: RentalError) -> Tuple[str, Dict[str, Any]]:
    """Builds the named JSend failure for an error raised by the rental engine."""
    if isinstance(error, NotFoundError):
        name = "not_found"
    elif isinstance(error, (ConflictError, BikeUnavailableError, InvalidStateError)):
        name = "conflict"
    else:
        name = "bad_request"

    extra = {}
    if isinstance(error, NotInParkingZoneError):
        extra["nearest_zone"] = error.nearest_zone.serialize() if error.nearest_zone is not None else None
        extra["distance"] = error.distance
    elif hasattr(error, "rental_id"):
        extra["rental_id"] = error.rental_id

    return name, failure(error.message, type(error).__name__, **extra)
