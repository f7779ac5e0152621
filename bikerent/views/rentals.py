"""
Rental Related Views
---------------------------

Handles viewing and ending rentals.

To start a rental, go through the bike.
"""

from aiohttp_apispec import docs
from marshmallow import ValidationError

from bikerent.models import Location, Rental
from bikerent.models.util import RentalStatus
from bikerent.serializer import JSendSchema, JSendStatus, failure
from bikerent.serializer.decorators import returns, expects
from bikerent.serializer.fields import Many, EnumField
from bikerent.serializer.misc import EndRentalSchema
from bikerent.serializer.models import RentalSchema
from bikerent.service.access import get_rentals, get_rental, get_user, get_bike
from bikerent.service.exceptions import RentalError, NotFoundError
from bikerent.views.base import BaseView
from bikerent.views.decorators import match_getter, requires_admin
from bikerent.views.utils import fail, error_responses


class RentalsView(BaseView):
    """
    Gets a list of all rentals, newest first, optionally filtered by ``?status=``.
    """
    url = "/rentals"
    name = "rentals"
    status_field = EnumField(RentalStatus)

    @docs(summary="Get All Rentals")
    @requires_admin
    @returns(rentals=JSendSchema.of(rentals=Many(RentalSchema())), **error_responses)
    async def get(self):
        try:
            status = self.status_field.deserialize(self.request.query["status"]) if "status" in self.request.query else None
        except ValidationError as error:
            return "bad_request", failure(" ".join(error.messages), "ValidationError")

        state = self.state
        rentals = []
        for rental in get_rentals(state.rentals, status=status):
            data = rental.serialize()
            user, bike = get_user(state, rental.user_id), get_bike(state, rental.bike_id)
            if user is not None:
                data["user"] = user.serialize()
            if bike is not None:
                data["bike"] = bike.serialize()
            rentals.append(data)

        return "rentals", {
            "status": JSendStatus.SUCCESS,
            "data": {"rentals": rentals}
        }


class RentalView(BaseView):
    """
    Gets a single rental. Active rentals include the price so far.
    """
    url = "/rentals/{id}"
    name = "rental"
    with_rental = match_getter(get_rental, 'rental', rental_id='id')

    @with_rental
    @docs(summary="Get A Rental")
    @returns(JSendSchema.of(rental=RentalSchema()))
    async def get(self, rental: Rental):
        estimated_price = self.rental_manager.get_price_estimate(rental.id) if rental.is_active else None
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"rental": rental.serialize(estimated_price=estimated_price)}
        }


class RentalEndView(BaseView):
    """
    Ends a rental for the user riding it. The bike must be inside
    a parking zone and a photo of the returned bike is required.
    """
    url = "/rentals/{id}/end"
    name = "rental_end"

    @docs(summary="End A Rental")
    @expects(EndRentalSchema())
    @returns(rental_ended=JSendSchema.of(rental=RentalSchema()), **error_responses)
    async def patch(self):
        data = self.request["data"]
        rental_id = self.request.match_info["id"]

        # only the rider may end a rental; to anyone else it does not exist
        rental = self.rental_manager.ledger.get(rental_id)
        if rental is None or rental.user_id != data["user_id"]:
            return fail(NotFoundError(f"No rental with id {rental_id}."))

        try:
            rental = await self.rental_manager.end_rental(
                rental_id, Location(data["lat"], data["lng"]), data["photo"]
            )
        except RentalError as error:
            return fail(error)

        return "rental_ended", {
            "status": JSendStatus.SUCCESS,
            "data": {"rental": rental.serialize()}
        }
