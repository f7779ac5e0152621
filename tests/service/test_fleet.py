import pytest

from bikerent.models import BikeStatus, Location, Rental
from bikerent.service.access import FleetStore
from bikerent.service.exceptions import NotFoundError, ConflictError
from tests.util import START


@pytest.fixture
def fleet(bikes):
    return FleetStore(bikes)


class TestFleetStore:

    def test_by_status(self, fleet):
        assert [bike.id for bike in fleet.by_status(BikeStatus.AVAILABLE)] == ["bike_1", "bike_2"]
        assert [bike.id for bike in fleet.by_status(BikeStatus.MAINTENANCE)] == ["bike_3"]

    def test_mark_rented(self, fleet):
        new_fleet, bike = fleet.mark_rented("bike_1", START)
        assert bike.status is BikeStatus.RENTED
        assert bike.updated_at == START
        assert new_fleet.get("bike_1") == bike
        assert fleet.get("bike_1").status is BikeStatus.AVAILABLE, "the old store is untouched"

    def test_mark_rented_missing(self, fleet):
        with pytest.raises(NotFoundError):
            fleet.mark_rented("bike_404", START)

    def test_mark_rented_unavailable(self, fleet):
        with pytest.raises(ConflictError):
            fleet.mark_rented("bike_3", START)

    def test_mark_available_moves_bike(self, fleet):
        fleet, _ = fleet.mark_rented("bike_1", START)
        fleet, bike = fleet.mark_available("bike_1", START + 1, Location(44.8166, 20.4602))
        assert bike.status is BikeStatus.AVAILABLE
        assert (bike.lat, bike.lng) == (44.8166, 20.4602)
        assert bike.updated_at == START + 1

    def test_mark_available_keeps_location(self, fleet):
        before = fleet.get("bike_3")
        _, bike = fleet.mark_available("bike_3", START)
        assert bike.status is BikeStatus.AVAILABLE
        assert bike.location == before.location

    def test_mark_available_missing(self, fleet):
        with pytest.raises(NotFoundError):
            fleet.mark_available("bike_404", START)

    def test_override_status(self, fleet):
        _, bike = fleet.override_status("bike_1", BikeStatus.MAINTENANCE, START)
        assert bike.status is BikeStatus.MAINTENANCE

    def test_override_rented_bike(self, fleet):
        fleet, _ = fleet.mark_rented("bike_1", START)
        rental = Rental("ren_1", "user_1", "bike_1", START)
        with pytest.raises(ConflictError):
            fleet.override_status("bike_1", BikeStatus.MAINTENANCE, START, active_rental=rental)

    def test_override_to_rented(self, fleet):
        with pytest.raises(ConflictError):
            fleet.override_status("bike_1", BikeStatus.RENTED, START)
