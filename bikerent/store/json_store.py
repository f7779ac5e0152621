"""
JSON File Store
---------------

Keeps the application state in a single JSON file in the same
camelCase format the sync endpoints use. Writes go to a temporary
file that then replaces the old one, so a crash mid-write never
leaves a truncated state behind.
"""

import json
import os
import tempfile

from marshmallow import ValidationError

from bikerent import logger
from bikerent.models import AppState, Bike, ParkingZone, BikeType, BikeStatus
from bikerent.models.util import now_ms
from bikerent.serializer.state import AppStateSchema
from bikerent.service.exceptions import StateLoadError
from bikerent.store.persistent_store import PersistentStore

state_schema = AppStateSchema()


def default_state() -> AppState:
    """The state a fresh installation starts with: the Belgrade fleet and its parking zones."""
    updated_at = now_ms()
    bikes = [
        ("bike_1", "BG-001", BikeType.CITY, 120, 44.8158, 20.4600, BikeStatus.AVAILABLE),
        ("bike_2", "BG-002", BikeType.E_BIKE, 220, 44.8142, 20.4555, BikeStatus.AVAILABLE),
        ("bike_3", "BG-003", BikeType.MTB, 160, 44.8206, 20.4526, BikeStatus.AVAILABLE),
        ("bike_4", "BG-004", BikeType.CITY, 120, 44.8017, 20.4657, BikeStatus.AVAILABLE),
        ("bike_5", "BG-005", BikeType.CITY, 120, 44.8036, 20.4688, BikeStatus.AVAILABLE),
        ("bike_6", "BG-006", BikeType.E_BIKE, 220, 44.8150, 20.4335, BikeStatus.AVAILABLE),
        ("bike_7", "BG-007", BikeType.MTB, 160, 44.8165, 20.4360, BikeStatus.AVAILABLE),
        ("bike_8", "BG-008", BikeType.CITY, 120, 44.8050, 20.4860, BikeStatus.AVAILABLE),
        ("bike_9", "BG-009", BikeType.E_BIKE, 220, 44.8040, 20.4900, BikeStatus.MAINTENANCE),
        ("bike_10", "BG-010", BikeType.CITY, 120, 44.7920, 20.4750, BikeStatus.DISABLED),
    ]
    zones = [
        ParkingZone("pz_1", "Trg Republike", 44.8166, 20.4602, 180, 15),
        ParkingZone("pz_2", "Kalemegdan", 44.8231, 20.4502, 220, 20),
        ParkingZone("pz_3", "Slavija", 44.8025, 20.4661, 200, 18),
        ParkingZone("pz_4", "Ušće", 44.8160, 20.4345, 240, 25),
        ParkingZone("pz_5", "Vukov spomenik", 44.8047, 20.4867, 200, 15),
        ParkingZone("pz_bilecka", "Bilećka 14", 44.7732, 20.4785, 100, 8),
    ]
    return AppState(
        bikes=[Bike(*bike, updated_at=updated_at) for bike in bikes],
        parking_zones=zones,
    )


class JsonFileStore(PersistentStore):

    def __init__(self, path: str):
        self.path = path

    def load(self) -> AppState:
        """
        Loads the state file, seeding the default state when there is none.

        :raises StateLoadError: When the file exists but is not a valid state.
        """
        if not os.path.exists(self.path):
            logger.info("No state at %s, starting from the default fleet", self.path)
            return default_state()

        try:
            with open(self.path, encoding="utf-8") as state_file:
                raw = json.load(state_file)
            return state_schema.load(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as error:
            raise StateLoadError(f"Could not load the state from {self.path}: {error}") from error

    def save(self, state: AppState):
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        descriptor, temporary = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(descriptor, "w", encoding="utf-8") as state_file:
                json.dump(state_schema.dump(state), state_file, indent=2, ensure_ascii=False)
            os.replace(temporary, self.path)
        except BaseException:
            os.unlink(temporary)
            raise
