"""
Model Serializers
-----------------

Defines the API representation of the records in the system.
"""

from marshmallow import Schema, validates_schema, ValidationError
from marshmallow.fields import Integer, Boolean, String, Nested, Float, Dict, List

from bikerent.models.util import BikeType, BikeStatus, RentalStatus
from bikerent.serializer.geojson import GeoJSON, GeoJSONType
from .fields import EnumField


class BikeSchema(Schema):
    id = String(required=True)
    label = String(required=True)
    type = EnumField(BikeType)
    price_per_hour = Float()
    status = EnumField(BikeStatus)
    available = Boolean()
    updated_at = Integer()
    current_location = Nested(GeoJSON(GeoJSONType.FEATURE))


class UserSchema(Schema):
    id = String(required=True)
    username = String()
    first_name = String()
    last_name = String()
    email = String()
    phone = String()


class RentalSchema(Schema):
    id = String(required=True)
    user_id = String(required=True)
    bike_id = String(required=True)
    status = EnumField(RentalStatus, required=True)

    start_time = Integer(required=True)
    end_time = Integer()
    start_location = Nested(GeoJSON(GeoJSONType.FEATURE))
    end_location = Nested(GeoJSON(GeoJSONType.FEATURE))

    is_active = Boolean(required=True)
    estimated_price = Float()
    price = Float()
    return_photo = String()

    user = Nested(UserSchema)
    bike = Nested(BikeSchema)

    @validates_schema
    def assert_end_time_with_price(self, data, **kwargs):
        """
        Asserts that when a rental is complete both the price and end time are included.
        """
        if "price" in data and "end_time" not in data:
            raise ValidationError("If the price is included, you must also include the end time.")
        elif "price" not in data and "end_time" in data:
            raise ValidationError("If the end time is included, you must also include the price.")
        if "price" in data and "estimated_price" in data:
            raise ValidationError("Rental should have one of either price or estimated_price.")


class ParkingZoneData(Schema):
    id = String(required=True)
    name = String(required=True)
    center = List(Float())
    radius_meters = Float(required=True)
    capacity = Integer()
    distance = Float()


class ParkingZoneSchema(GeoJSON):

    def __init__(self, *args, **kwargs):
        super().__init__(GeoJSONType.FEATURE, *args, **kwargs)

    properties = Nested(ParkingZoneData())


class NotificationSchema(Schema):
    id = String(required=True)
    time = Integer(required=True)
    title = String(required=True)
    message = String(required=True)
    rental_id = String(allow_none=True)
    read = Boolean()


class StatisticsSchema(Schema):
    bikes = Dict(keys=String(), values=Integer())
    rentals = Dict(keys=String(), values=Float())
    users = Dict(keys=String(), values=Integer())
    issues = Dict(keys=String(), values=Integer())
