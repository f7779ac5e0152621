"""
User Related Views
------------------------
"""

from aiohttp_apispec import docs

from bikerent.models import User
from bikerent.serializer import JSendSchema, JSendStatus, failure
from bikerent.serializer.decorators import returns
from bikerent.serializer.fields import Many
from bikerent.serializer.models import RentalSchema, NotificationSchema, UserSchema
from bikerent.service.access import get_user, get_rentals
from bikerent.service.notifications import notifications_for
from bikerent.views.base import BaseView
from bikerent.views.decorators import match_getter
from bikerent.views.utils import error_responses

USER_IDENTIFIER_REGEX = "[^{}/]+"


class UserView(BaseView):
    url = f"/users/{{id:{USER_IDENTIFIER_REGEX}}}"
    name = "user"
    with_user = match_getter(get_user, 'user', user_id='id')

    @with_user
    @docs(summary="Get A User")
    @returns(JSendSchema.of(user=UserSchema()))
    async def get(self, user: User):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"user": user.serialize()}
        }


class UserRentalsView(BaseView):
    """Gets the rental history of a user, newest first."""

    url = f"/users/{{id:{USER_IDENTIFIER_REGEX}}}/rentals"
    name = "user_rentals"

    @docs(summary="Get Rentals For User")
    @returns(JSendSchema.of(rentals=Many(RentalSchema())))
    async def get(self):
        user_id = self.request.match_info["id"]
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"rentals": [rental.serialize() for rental in get_rentals(self.state.rentals, user_id=user_id)]}
        }


class UserCurrentRentalView(BaseView):
    """
    Gets the active rental of a user, along with the price so far.
    """

    url = f"/users/{{id:{USER_IDENTIFIER_REGEX}}}/rentals/current"
    name = "user_current_rental"

    @docs(summary="Get Current Rental For User")
    @returns(
        rental=JSendSchema.of(rental=RentalSchema()),
        **error_responses
    )
    async def get(self):
        rental = self.rental_manager.active_rental(self.request.match_info["id"])
        if rental is None:
            return "not_found", failure("You have no current rental.", "NotFoundError")

        return "rental", {
            "status": JSendStatus.SUCCESS,
            "data": {"rental": rental.serialize(
                estimated_price=self.rental_manager.get_price_estimate(rental.id)
            )}
        }


class UserNotificationsView(BaseView):
    url = f"/users/{{id:{USER_IDENTIFIER_REGEX}}}/notifications"
    name = "user_notifications"

    @docs(summary="Get Notifications For User")
    @returns(JSendSchema.of(notifications=Many(NotificationSchema())))
    async def get(self):
        user_id = self.request.match_info["id"]
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"notifications": [
                notification.serialize() for notification in notifications_for(self.state.notifications, user_id)
            ]}
        }
