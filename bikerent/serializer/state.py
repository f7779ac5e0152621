"""
State Serializers
-----------------

Defines the wire format of the whole application state. This is the format
the state file is written in and the format exchanged with the remote sync
endpoints, so it keeps the camelCase keys the mobile client uses.
"""

from marshmallow import Schema, EXCLUDE, post_load, post_dump, ValidationError
from marshmallow.fields import String, Integer, Float, Boolean, List, Nested

from bikerent.models import AppState, Bike, Issue, Notification, ParkingZone, Rental, User
from bikerent.models.parking_zone import DEFAULT_CAPACITY
from bikerent.models.util import BikeType, BikeStatus, RentalStatus, IssueStatus
from .fields import EnumField


class RecordSchema(Schema):
    """
    Base schema for the state records. Unknown keys are dropped on load,
    empty optional values are dropped on dump, and loaded data is turned
    into the record given by ``__record__``.
    """

    __record__ = None

    class Meta:
        unknown = EXCLUDE

    @post_dump
    def remove_empty(self, data, **kwargs):
        return {key: value for key, value in data.items() if value is not None}

    def prepare(self, data):
        """Adjusts the loaded data before the record is built."""
        return data

    @post_load
    def make_record(self, data, **kwargs):
        try:
            return self.__record__(**self.prepare(data))
        except (TypeError, ValueError) as error:
            raise ValidationError(str(error)) from error


class UserStateSchema(RecordSchema):
    __record__ = User

    id = String(required=True)
    username = String(required=True)
    email = String(required=True)
    phone = String(load_default="")
    first_name = String(data_key="firstName", load_default="")
    last_name = String(data_key="lastName", load_default="")
    password_hash = String(data_key="passwordHash", load_default="")
    password_salt = String(data_key="passwordSalt", load_default="")
    created_at = Integer(data_key="createdAt", load_default=0)


class BikeStateSchema(RecordSchema):
    __record__ = Bike

    id = String(required=True)
    label = String(required=True)
    type = EnumField(BikeType, required=True)
    price_per_hour = Float(data_key="pricePerHour", required=True)
    lat = Float(required=True)
    lng = Float(required=True)
    status = EnumField(BikeStatus, load_default=BikeStatus.AVAILABLE)
    updated_at = Integer(data_key="updatedAt", load_default=0)


class ParkingZoneStateSchema(RecordSchema):
    __record__ = ParkingZone

    id = String(required=True)
    name = String(required=True)
    lat = Float(required=True)
    lng = Float(required=True)
    radius_meters = Float(data_key="radiusMeters", required=True)
    capacity = Integer(allow_none=True, load_default=DEFAULT_CAPACITY)

    def prepare(self, data):
        # zones saved before capacity existed get the default
        if data.get("capacity") is None:
            data["capacity"] = DEFAULT_CAPACITY
        return data


class RentalStateSchema(RecordSchema):
    __record__ = Rental

    id = String(required=True)
    user_id = String(data_key="userId", required=True)
    bike_id = String(data_key="bikeId", required=True)
    status = EnumField(RentalStatus, required=True)
    start_at = Integer(data_key="startAt", required=True)
    end_at = Integer(data_key="endAt", allow_none=True)
    start_lat = Float(data_key="startLat", allow_none=True)
    start_lng = Float(data_key="startLng", allow_none=True)
    end_lat = Float(data_key="endLat", allow_none=True)
    end_lng = Float(data_key="endLng", allow_none=True)
    total_price = Float(data_key="totalPrice", allow_none=True)
    return_photo = String(data_key="returnPhotoUri", allow_none=True)


class NotificationStateSchema(RecordSchema):
    __record__ = Notification

    id = String(required=True)
    user_id = String(data_key="userId", required=True)
    created_at = Integer(data_key="createdAt", required=True)
    title = String(required=True)
    message = String(required=True)
    related_rental_id = String(data_key="relatedRentalId", allow_none=True)
    read = Boolean(load_default=False)


class IssueStateSchema(RecordSchema):
    __record__ = Issue

    id = String(required=True)
    user_id = String(data_key="userId", required=True)
    created_at = Integer(data_key="createdAt", required=True)
    description = String(required=True)
    photo = String(data_key="photoUri", load_default="")
    bike_id = String(data_key="bikeId", allow_none=True)
    rental_id = String(data_key="rentalId", allow_none=True)
    status = EnumField(IssueStatus, load_default=IssueStatus.OPEN)


class AppStateSchema(RecordSchema):
    """The schema of the complete application state."""

    __record__ = AppState

    users = List(Nested(UserStateSchema), load_default=list)
    bikes = List(Nested(BikeStateSchema), load_default=list)
    parking_zones = List(Nested(ParkingZoneStateSchema), data_key="parkingZones", load_default=list)
    rentals = List(Nested(RentalStateSchema), load_default=list)
    notifications = List(Nested(NotificationStateSchema), load_default=list)
    issues = List(Nested(IssueStateSchema), load_default=list)
    current_user_id = String(data_key="currentUserId", allow_none=True)
