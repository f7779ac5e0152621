"""
Rentals
=======

The rental ledger holds every rental, active and finished. Finished
rentals are history: the ledger only ever opens and closes rentals.
"""

from typing import Tuple, Optional

from attr import dataclass, attrib, evolve

from bikerent.models import Rental, RentalStatus, Location
from bikerent.models.util import new_id
from bikerent.service.exceptions import NotFoundError, AlreadyActiveError, InvalidStateError


@dataclass(frozen=True)
class RentalLedger:
    rentals: Tuple[Rental, ...] = attrib(factory=tuple, converter=tuple)

    def all(self) -> Tuple[Rental, ...]:
        return self.rentals

    def get(self, rental_id: str) -> Optional[Rental]:
        return next((rental for rental in self.rentals if rental.id == rental_id), None)

    def for_user(self, user_id: str) -> Tuple[Rental, ...]:
        return tuple(rental for rental in self.rentals if rental.user_id == user_id)

    def for_bike(self, bike_id: str) -> Tuple[Rental, ...]:
        return tuple(rental for rental in self.rentals if rental.bike_id == bike_id)

    def active(self) -> Tuple[Rental, ...]:
        return tuple(rental for rental in self.rentals if rental.is_active)

    def active_for_user(self, user_id: str) -> Optional[Rental]:
        return next((rental for rental in self.for_user(user_id) if rental.is_active), None)

    def active_for_bike(self, bike_id: str) -> Optional[Rental]:
        return next((rental for rental in self.for_bike(bike_id) if rental.is_active), None)

    def has_active_rental(self, user_id: str) -> bool:
        """Checks if the given user has an active rental."""
        return self.active_for_user(user_id) is not None

    def open(
        self, user_id: str, bike_id: str, now: int, start_location: Location = None
    ) -> Tuple['RentalLedger', Rental]:
        """
        Opens a new rental for a user.

        :raises AlreadyActiveError: If the user already has an active rental.
        """
        current = self.active_for_user(user_id)
        if current is not None:
            raise AlreadyActiveError(current.id)

        rental = Rental(
            id=new_id("ren"),
            user_id=user_id,
            bike_id=bike_id,
            start_at=now,
            start_lat=start_location.lat if start_location else None,
            start_lng=start_location.lng if start_location else None,
        )
        return RentalLedger(self.rentals + (rental,)), rental

    def close(
        self, rental_id: str, now: int, end_location: Location, total_price: float, photo_ref: str
    ) -> Tuple['RentalLedger', Rental]:
        """
        Finishes an active rental. A finished rental can never be reopened.

        :raises NotFoundError: If there is no such rental.
        :raises InvalidStateError: If the rental is already finished.
        """
        rental = self.get(rental_id)
        if rental is None:
            raise NotFoundError(f"No rental with id {rental_id}.")
        if not rental.is_active:
            raise InvalidStateError(f"Rental {rental_id} is already {rental.status.value}.")

        finished = evolve(
            rental,
            status=RentalStatus.FINISHED,
            end_at=max(now, rental.start_at),
            end_lat=end_location.lat,
            end_lng=end_location.lng,
            total_price=total_price,
            return_photo=photo_ref,
        )
        rentals = tuple(finished if r.id == rental_id else r for r in self.rentals)
        return RentalLedger(rentals), finished


def get_rentals(rentals, *, user_id: str = None, bike_id: str = None, status: RentalStatus = None):
    """Gets the rentals matching the given filters, newest first."""
    matching = [
        rental for rental in rentals
        if (user_id is None or rental.user_id == user_id)
        and (bike_id is None or rental.bike_id == bike_id)
        and (status is None or rental.status is status)
    ]
    return sorted(matching, key=lambda rental: rental.start_at, reverse=True)


def get_rental(state, rental_id: str) -> Optional[Rental]:
    return RentalLedger(state.rentals).get(rental_id)
