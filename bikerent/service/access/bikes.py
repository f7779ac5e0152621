"""
Bikes
=====

The fleet store holds the bike collection. It never changes in place:
every transition returns a new store along with the updated bike.
"""

from typing import Tuple, Optional, Iterable

from attr import dataclass, attrib, evolve

from bikerent.models import Bike, BikeStatus, Location, Rental
from bikerent.service.exceptions import NotFoundError, ConflictError


@dataclass(frozen=True)
class FleetStore:
    bikes: Tuple[Bike, ...] = attrib(factory=tuple, converter=tuple)

    def all(self) -> Tuple[Bike, ...]:
        return self.bikes

    def get(self, bike_id: str) -> Optional[Bike]:
        return next((bike for bike in self.bikes if bike.id == bike_id), None)

    def by_status(self, status: BikeStatus) -> Tuple[Bike, ...]:
        return tuple(bike for bike in self.bikes if bike.status is status)

    def mark_rented(self, bike_id: str, now: int) -> Tuple['FleetStore', Bike]:
        """
        Takes an available bike out of circulation for a rental.

        :raises NotFoundError: If there is no such bike.
        :raises ConflictError: If the bike is not available.
        """
        bike = self._require(bike_id)
        if bike.status is not BikeStatus.AVAILABLE:
            raise ConflictError(f"Bike {bike_id} is {bike.status.value}, not available.")
        return self._replace(evolve(bike, status=BikeStatus.RENTED, updated_at=now))

    def mark_available(self, bike_id: str, now: int, location: Location = None) -> Tuple['FleetStore', Bike]:
        """
        Puts a bike back into circulation, optionally at a new location.
        Any prior status is accepted so this can also be used to recover a bike.

        :raises NotFoundError: If there is no such bike.
        """
        bike = self._require(bike_id)
        changes = {"status": BikeStatus.AVAILABLE, "updated_at": now}
        if location is not None:
            changes.update(lat=location.lat, lng=location.lng)
        return self._replace(evolve(bike, **changes))

    def override_status(
        self, bike_id: str, status: BikeStatus, now: int, active_rental: Optional[Rental] = None
    ) -> Tuple['FleetStore', Bike]:
        """
        Sets the status of a bike on behalf of fleet management.

        :param active_rental: The rental currently holding the bike, if any.
        :raises NotFoundError: If there is no such bike.
        :raises ConflictError: If the bike is being rented, or if ``rented`` is requested.
        """
        bike = self._require(bike_id)
        if active_rental is not None and status is not BikeStatus.RENTED:
            raise ConflictError(f"Bike {bike_id} is currently rented by {active_rental.user_id}.")
        if status is BikeStatus.RENTED and active_rental is None:
            raise ConflictError("Bikes can only be marked as rented by starting a rental.")
        return self._replace(evolve(bike, status=status, updated_at=now))

    def _require(self, bike_id: str) -> Bike:
        bike = self.get(bike_id)
        if bike is None:
            raise NotFoundError(f"No bike with id {bike_id}.")
        return bike

    def _replace(self, updated: Bike) -> Tuple['FleetStore', Bike]:
        bikes = tuple(updated if bike.id == updated.id else bike for bike in self.bikes)
        return FleetStore(bikes), updated


def get_bikes(bikes: Iterable[Bike], *, status: BikeStatus = None) -> Tuple[Bike, ...]:
    """Gets the bikes, optionally filtered by status."""
    store = FleetStore(bikes)
    return store.all() if status is None else store.by_status(status)


def get_bike(state, bike_id: str) -> Optional[Bike]:
    return FleetStore(state.bikes).get(bike_id)
