"""
Bike Related Views
-------------------------

Handles listing bikes, starting rentals on them, and
the status overrides of fleet management.
"""

from aiohttp_apispec import docs
from attr import evolve
from marshmallow import ValidationError

from bikerent import logger
from bikerent.models import Bike, Location
from bikerent.models.util import now_ms, BikeStatus
from bikerent.serializer import JSendSchema, JSendStatus, failure
from bikerent.serializer.decorators import returns, expects
from bikerent.serializer.fields import Many, EnumField
from bikerent.serializer.misc import StartRentalSchema, BikeStatusSchema
from bikerent.serializer.models import BikeSchema, RentalSchema
from bikerent.service.access import FleetStore, RentalLedger, get_bikes, get_bike
from bikerent.service.exceptions import RentalError
from bikerent.views.base import BaseView
from bikerent.views.decorators import match_getter, requires_admin
from bikerent.views.utils import fail, error_responses

BIKE_IDENTIFIER_REGEX = "[^{}/]+"


class BikesView(BaseView):
    """
    Gets the bikes, optionally filtered by ``?status=``.
    """
    url = "/bikes"
    name = "bikes"
    status_field = EnumField(BikeStatus)

    @docs(summary="Get All Bikes")
    @returns(bikes=JSendSchema.of(bikes=Many(BikeSchema())), **error_responses)
    async def get(self):
        try:
            status = self.status_field.deserialize(self.request.query["status"]) if "status" in self.request.query else None
        except ValidationError as error:
            return "bad_request", failure(" ".join(error.messages), "ValidationError")

        return "bikes", {
            "status": JSendStatus.SUCCESS,
            "data": {"bikes": [bike.serialize() for bike in get_bikes(self.state.bikes, status=status)]}
        }


class BikeView(BaseView):
    """
    Gets or updates a single bike.
    """
    url = f"/bikes/{{id:{BIKE_IDENTIFIER_REGEX}}}"
    name = "bike"
    with_bike = match_getter(get_bike, 'bike', bike_id='id')

    @with_bike
    @docs(summary="Get A Bike")
    @returns(JSendSchema.of(bike=BikeSchema()))
    async def get(self, bike: Bike):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"bike": bike.serialize()}
        }

    @with_bike
    @docs(summary="Override The Status Of A Bike")
    @requires_admin
    @expects(BikeStatusSchema())
    @returns(updated=JSendSchema.of(bike=BikeSchema()), **error_responses)
    async def patch(self, bike: Bike):
        """
        Moves a bike in or out of maintenance. Bikes that are being
        rented can not be moved, and only rentals can rent a bike.
        """
        status = self.request["data"]["status"]

        async with self.state_manager.lock:
            state = self.state
            active_rental = RentalLedger(state.rentals).active_for_bike(bike.id)
            try:
                fleet, bike = FleetStore(state.bikes).override_status(bike.id, status, now_ms(), active_rental)
            except RentalError as error:
                return fail(error)
            await self.state_manager.commit(evolve(state, bikes=fleet.all()))

        logger.info("Admin %s set %s to %s", self.request["token"], bike, status.value)
        return "updated", {
            "status": JSendStatus.SUCCESS,
            "data": {"bike": bike.serialize()}
        }


class BikeRentalsView(BaseView):
    """
    Gets the rentals for a single bike, or starts a new one.
    """
    url = f"/bikes/{{id:{BIKE_IDENTIFIER_REGEX}}}/rentals"
    name = "bike_rentals"

    @docs(summary="Get Past Rentals For Bike")
    @requires_admin
    @returns(JSendSchema.of(rentals=Many(RentalSchema())))
    async def get(self):
        bike_id = self.request.match_info["id"]
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"rentals": [
                rental.serialize() for rental in RentalLedger(self.state.rentals).for_bike(bike_id)
            ]}
        }

    @docs(summary="Start A New Rental")
    @expects(StartRentalSchema())
    @returns(rental_created=(JSendSchema.of(rental=RentalSchema()), 201), **error_responses)
    async def post(self):
        """
        It is most logical that a rental is created on a bike resource.
        This metaphor matches real life the best, as it resembles picking a bike off the rack.
        A user may start a rental on any available bike by sending a POST request
        to the bike's rentals resource with their user id and, optionally, where they are.
        """
        data = self.request["data"]
        start_location = Location(data["lat"], data["lng"]) if "lat" in data else None

        try:
            rental = await self.rental_manager.start_rental(data["user_id"], self.request.match_info["id"], start_location)
        except RentalError as error:
            return fail(error)

        return "rental_created", {
            "status": JSendStatus.SUCCESS,
            "data": {"rental": rental.serialize(estimated_price=0.0)}
        }
