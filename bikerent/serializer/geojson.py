"""
GeoJSON Schema
--------------

Bikes, rental start and end points and parking zones all leave the api
as GeoJSON point features (``[lng, lat]``). Parking zones carry their
radius and capacity in the feature's properties.
"""
from enum import Enum
from typing import Optional

from marshmallow import Schema, validates_schema, ValidationError
from marshmallow.fields import Dict, Raw, Nested

from bikerent.serializer.fields import EnumField


class GeoJSONType(str, Enum):
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"


class GeometryType(str, Enum):
    POINT = "Point"
    MULTIPOINT = "MultiPoint"
    POLYGON = "Polygon"


class Geometry(Schema):
    type = EnumField(GeometryType)
    coordinates = Raw()


class GeoJSON(Schema):
    """
    A feature, or a collection of them.

    :param feature_type: When given, only objects of this type validate.
    """

    def __init__(self, feature_type: Optional[GeoJSONType] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.feature_type = feature_type

    type = EnumField(GeoJSONType)
    properties = Dict()
    features = Nested(lambda: GeoJSON(GeoJSONType.FEATURE), many=True)
    geometry = Nested(Geometry)

    @validates_schema
    def assert_shape(self, data, **kwargs):
        geojson_type = data.get("type")
        if self.feature_type is not None and geojson_type != self.feature_type:
            raise ValidationError(f"Expected a {self.feature_type.value}, not {geojson_type}.")
        if geojson_type == GeoJSONType.FEATURE and "geometry" not in data:
            raise ValidationError("A feature needs a geometry.")
        if geojson_type == GeoJSONType.FEATURE_COLLECTION and "features" not in data:
            raise ValidationError("A feature collection needs a list of features.")
