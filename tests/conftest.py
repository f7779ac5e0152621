from base64 import b64encode

import pytest
from aiohttp.test_utils import TestClient

from bikerent.app import build_app
from bikerent.models import AppState, Bike, BikeType, BikeStatus, ParkingZone
from bikerent.service.manager.rental_manager import RentalManager
from bikerent.service.manager.state_manager import StateManager
from bikerent.service.notifications import NotificationSink
from bikerent.service.photos import PhotoStore
from bikerent.store import MemoryStore
from tests.util import fake, FakeClock, random_user, TRG_REPUBLIKE


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def zones():
    return [
        ParkingZone("pz_1", "Trg Republike", *TRG_REPUBLIKE, radius_meters=180, capacity=15),
        ParkingZone("pz_2", "Kalemegdan", 44.8231, 20.4502, radius_meters=220, capacity=20),
    ]


@pytest.fixture
def bikes():
    return [
        Bike("bike_1", "BG-001", BikeType.CITY, 120, 44.8158, 20.4600),
        Bike("bike_2", "BG-002", BikeType.E_BIKE, 220, 44.8142, 20.4555),
        Bike("bike_3", "BG-003", BikeType.MTB, 160, 44.8206, 20.4526, status=BikeStatus.MAINTENANCE),
    ]


@pytest.fixture
def users():
    return [random_user("user_1"), random_user("user_2")]


@pytest.fixture
def initial_state(users, bikes, zones) -> AppState:
    return AppState(users=users, bikes=bikes, parking_zones=zones)


@pytest.fixture
def memory_store(initial_state):
    return MemoryStore(initial_state)


@pytest.fixture
async def state_manager(memory_store) -> StateManager:
    manager = StateManager(memory_store)
    await manager._rebuild()
    return manager


@pytest.fixture
def photo_store(tmp_path):
    return PhotoStore(str(tmp_path / "photos"))


@pytest.fixture
def photo(tmp_path) -> str:
    """A return photo taken on the device."""
    path = tmp_path / "x.jpg"
    path.write_bytes(fake.binary(length=256))
    return str(path)


@pytest.fixture
def rental_manager(state_manager, photo_store, clock) -> RentalManager:
    return RentalManager(state_manager, photo_store, clock=clock)


@pytest.fixture
def notification_sink(state_manager, rental_manager) -> NotificationSink:
    return NotificationSink(state_manager, rental_manager)


@pytest.fixture
def admin_headers():
    token = b64encode(f"admin_1:{fake.password()}".encode()).decode()
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(aiohttp_client, memory_store, tmp_path, clock) -> TestClient:
    app = build_app(
        memory_store,
        photos_dir=str(tmp_path / "photos"),
        uploads_dir=str(tmp_path / "uploads"),
        clock=clock,
    )
    return await aiohttp_client(app)
