import pytest

from bikerent.models import Location, RentalStatus
from bikerent.service.access import RentalLedger, get_rentals
from bikerent.service.exceptions import AlreadyActiveError, NotFoundError, InvalidStateError, ConflictError
from tests.util import START, HALF_AN_HOUR

END = Location(44.8166, 20.4602)


@pytest.fixture
def ledger():
    return RentalLedger()


class TestRentalLedger:

    def test_open(self, ledger):
        ledger, rental = ledger.open("user_1", "bike_1", START, Location(44.8158, 20.46))
        assert rental.id.startswith("ren_")
        assert rental.status is RentalStatus.ACTIVE
        assert rental.start_at == START
        assert rental.start_location == Location(44.8158, 20.46)
        assert ledger.active_for_user("user_1") == rental
        assert ledger.active_for_bike("bike_1") == rental
        assert ledger.has_active_rental("user_1")

    def test_ids_are_unique(self, ledger):
        ledger, first = ledger.open("user_1", "bike_1", START)
        ledger, second = ledger.open("user_2", "bike_2", START)
        assert first.id != second.id

    def test_open_twice(self, ledger):
        ledger, rental = ledger.open("user_1", "bike_1", START)
        with pytest.raises(AlreadyActiveError) as error:
            ledger.open("user_1", "bike_2", START)
        assert error.value.rental_id == rental.id
        assert isinstance(error.value, ConflictError)

    def test_close(self, ledger):
        ledger, rental = ledger.open("user_1", "bike_1", START)
        ledger, closed = ledger.close(rental.id, START + HALF_AN_HOUR, END, 60.0, "photos/x.jpg")
        assert closed.status is RentalStatus.FINISHED
        assert closed.end_at == START + HALF_AN_HOUR
        assert closed.end_location == END
        assert closed.total_price == 60.0
        assert closed.return_photo == "photos/x.jpg"
        assert not ledger.has_active_rental("user_1")
        assert ledger.for_user("user_1") == (closed,)

    def test_close_missing(self, ledger):
        with pytest.raises(NotFoundError):
            ledger.close("ren_404", START, END, 0, "x.jpg")

    def test_close_twice(self, ledger):
        ledger, rental = ledger.open("user_1", "bike_1", START)
        ledger, closed = ledger.close(rental.id, START + HALF_AN_HOUR, END, 60.0, "x.jpg")
        with pytest.raises(InvalidStateError):
            ledger.close(rental.id, START + 2 * HALF_AN_HOUR, END, 120.0, "y.jpg")
        assert ledger.get(rental.id) == closed

    def test_reopen_after_close(self, ledger):
        ledger, rental = ledger.open("user_1", "bike_1", START)
        ledger, _ = ledger.close(rental.id, START + 1, END, 0, "x.jpg")
        ledger, second = ledger.open("user_1", "bike_1", START + 2)
        assert ledger.active() == (second,)

    def test_get_rentals_newest_first(self, ledger):
        ledger, first = ledger.open("user_1", "bike_1", START)
        ledger, second = ledger.open("user_2", "bike_2", START + 1)
        ledger, _ = ledger.close(first.id, START + 2, END, 0, "x.jpg")
        assert [rental.id for rental in get_rentals(ledger.all())] == [second.id, first.id]
        assert [rental.id for rental in get_rentals(ledger.all(), status=RentalStatus.ACTIVE)] == [second.id]
        assert [rental.id for rental in get_rentals(ledger.all(), user_id="user_1")] == [first.id]
