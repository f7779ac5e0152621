"""
Rental Manager
--------------

This module is what handles all the rentals in the system.

Responsibilities
================

This object handles everything needed for bike rentals.

- starting a rental
- ending a rental inside a parking zone
- checking rental availability
- estimating rental price
"""

from typing import Callable, Optional, Tuple

from attr import evolve

from bikerent import logger
from bikerent.events import EventHub, EventList
from bikerent.models import Bike, Location, ParkingZone, Rental
from bikerent.models.util import now_ms
from bikerent.pricing import get_price
from bikerent.service.access import FleetStore, RentalLedger, ParkingZoneIndex, get_user
from bikerent.service.exceptions import (
    NotFoundError, AlreadyActiveError, BikeUnavailableError, InvalidStateError,
    PhotoRequiredError, NotInParkingZoneError, SyncError,
)
from bikerent.service.manager.state_manager import StateManager
from bikerent.service.photos import PhotoStore


class RentalEvent(EventList):

    def rental_started(self, rental: Rental, bike: Bike):
        """A new rental was started."""

    def rental_ended(self, rental: Rental, bike: Bike):
        """A rental was ended inside a parking zone."""


class RentalManager:
    """
    Handles the lifecycle of the rental in the system.

    Also publishes events on its hub, so that other modules can stay up to date with the system.
    Events are published after the new state is committed; a failing subscriber is logged
    and never undoes the rental.
    """

    def __init__(self, state_manager: StateManager, photo_store: PhotoStore, clock: Callable[[], int] = now_ms):
        self._state_manager = state_manager
        self._photo_store = photo_store
        self._clock = clock
        self.hub = EventHub(RentalEvent)

    @property
    def fleet(self) -> FleetStore:
        return FleetStore(self._state_manager.state.bikes)

    @property
    def ledger(self) -> RentalLedger:
        return RentalLedger(self._state_manager.state.rentals)

    @property
    def zones(self) -> ParkingZoneIndex:
        return ParkingZoneIndex(self._state_manager.state.parking_zones)

    async def start_rental(self, user_id: str, bike_id: str, start_location: Location = None) -> Rental:
        """
        Starts a new rental of a bike for a user.

        :raises AlreadyActiveError: If the user currently has a rental active.
        :raises NotFoundError: If there is no such user or bike.
        :raises BikeUnavailableError: If the bike is not available.
        """
        async with self._state_manager.lock:
            state = self._state_manager.state
            fleet, ledger = FleetStore(state.bikes), RentalLedger(state.rentals)

            current = ledger.active_for_user(user_id)
            if current is not None:
                raise AlreadyActiveError(current.id)

            if get_user(state, user_id) is None:
                raise NotFoundError(f"No user with id {user_id}.")

            bike = fleet.get(bike_id)
            if bike is None:
                raise NotFoundError(f"No bike with id {bike_id}.")
            if not bike.available:
                raise BikeUnavailableError(bike_id, bike.status)

            now = self._clock()
            fleet, bike = fleet.mark_rented(bike_id, now)
            ledger, rental = ledger.open(user_id, bike_id, now, start_location)

            await self._state_manager.commit(evolve(state, bikes=fleet.all(), rentals=ledger.all()))

        logger.info("User %s started rental %s of %s", user_id, rental.id, bike)
        self._emit(RentalEvent.rental_started, rental, bike)
        return rental

    async def end_rental(self, rental_id: str, end_location: Location, photo_ref: str) -> Rental:
        """
        Ends a rental, returning the bike at the given location.

        The rental stays active unless every check passes and the return
        photo has been stored.

        :raises NotFoundError: If there is no such rental, or its bike is missing.
        :raises InvalidStateError: If the rental is not active.
        :raises PhotoRequiredError: If no return photo was given.
        :raises NotInParkingZoneError: If the bike is not inside a parking zone.
        :raises PhotoStorageError: If the return photo could not be stored.
        """
        async with self._state_manager.lock:
            rental, bike = self._require_active(rental_id)

            if not photo_ref:
                raise PhotoRequiredError()

            zones = self.zones
            if zones.containing(end_location) is None:
                closest = zones.nearest(end_location)
                nearest_zone, distance = closest if closest is not None else (None, None)
                raise NotInParkingZoneError(nearest_zone, distance)

            photo = await self._store_photo(rental_id, photo_ref)

            # re-read after the photo I/O
            state = self._state_manager.state
            fleet, ledger = FleetStore(state.bikes), RentalLedger(state.rentals)
            rental, bike = self._require_active(rental_id)

            now = self._clock()
            price = get_price(now - rental.start_at, bike.price_per_hour)
            ledger, rental = ledger.close(rental_id, now, end_location, price, photo)
            fleet, bike = fleet.mark_available(bike.id, now, end_location)

            await self._state_manager.commit(evolve(state, bikes=fleet.all(), rentals=ledger.all()))

        logger.info("Rental %s ended at %s, price %.2f", rental.id, end_location, price)
        self._emit(RentalEvent.rental_ended, rental, bike)
        return rental

    def active_rental(self, user_id: str) -> Optional[Rental]:
        """Gets the active rental for a given user."""
        return self.ledger.active_for_user(user_id)

    def has_active_rental(self, user_id: str) -> bool:
        """Checks if the given user has an active rental."""
        return self.ledger.has_active_rental(user_id)

    def is_in_use(self, bike_id: str) -> bool:
        """Checks if the given bike is in use."""
        return self.ledger.active_for_bike(bike_id) is not None

    def is_renting(self, user_id: str, bike_id: str) -> bool:
        """Checks if the given user is renting the given bike."""
        rental = self.active_rental(user_id)
        return rental is not None and rental.bike_id == bike_id

    def get_price_estimate(self, rental_id: str) -> float:
        """
        Gets the price of the rental so far, or the final price of a finished rental.

        :raises NotFoundError: If there is no such rental or its bike is missing.
        """
        rental = self.ledger.get(rental_id)
        if rental is None:
            raise NotFoundError(f"No rental with id {rental_id}.")
        if not rental.is_active:
            return rental.total_price

        bike = self.fleet.get(rental.bike_id)
        if bike is None:
            raise NotFoundError(f"Bike {rental.bike_id} of rental {rental_id} is missing.")
        return get_price(self._clock() - rental.start_at, bike.price_per_hour)

    def nearest_zone(self, location: Location) -> Optional[Tuple[ParkingZone, float]]:
        return self.zones.nearest(location)

    def containing_zone(self, location: Location) -> Optional[Tuple[ParkingZone, float]]:
        return self.zones.containing(location)

    def _require_active(self, rental_id: str) -> Tuple[Rental, Bike]:
        rental = self.ledger.get(rental_id)
        if rental is None:
            raise NotFoundError(f"No rental with id {rental_id}.")
        if not rental.is_active:
            raise InvalidStateError(f"Rental {rental_id} is already {rental.status.value}.")

        bike = self.fleet.get(rental.bike_id)
        if bike is None:
            raise NotFoundError(f"Bike {rental.bike_id} of rental {rental_id} is missing.")
        return rental, bike

    async def _store_photo(self, rental_id: str, photo_ref: str) -> str:
        """
        Copies the return photo into local storage and, when there is a remote,
        uploads it. A failed upload keeps the local copy.

        :raises PhotoStorageError: If the local copy could not be made.
        """
        local = await self._photo_store.persist(photo_ref, prefix=f"return_{rental_id}")

        sync = self._state_manager.sync
        if sync is None:
            return local

        try:
            return await sync.upload_photo(local, "rental")
        except SyncError as error:
            logger.warning("Keeping the local return photo for %s: %s", rental_id, error)
            return local

    def _emit(self, event, *args):
        try:
            self.hub.emit(event, *args)
        except Exception:
            logger.exception("A subscriber to %s failed", event.__name__)
