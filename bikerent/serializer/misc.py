from marshmallow import Schema, validates_schema, ValidationError
from marshmallow.fields import Float, String
from marshmallow.validate import Range

from bikerent.models.util import BikeStatus
from bikerent.serializer.fields import EnumField


class LocationSchema(Schema):
    lat = Float(validate=Range(-90, 90), metadata={"description": "The latitude."})
    lng = Float(validate=Range(-180, 180), metadata={"description": "The longitude."})

    @validates_schema
    def assert_both_coordinates(self, data, **kwargs):
        if ("lat" in data) != ("lng" in data):
            raise ValidationError("Supply both lat and lng, or neither.")


class StartRentalSchema(LocationSchema):
    """The schema of the start rental request."""
    user_id = String(required=True, metadata={"description": "The user renting the bike."})


class EndRentalSchema(Schema):
    """The schema of the end rental request."""
    user_id = String(required=True, metadata={"description": "The user returning the bike."})
    lat = Float(required=True, validate=Range(-90, 90))
    lng = Float(required=True, validate=Range(-180, 180))
    photo = String(load_default="", metadata={"description": "A reference to the return photo."})


class BikeStatusSchema(Schema):
    """An administrative status override."""
    status = EnumField(BikeStatus, required=True)
