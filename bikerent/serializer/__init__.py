"""
.. autoclasstree:: bikerent.serializer

The serializer package houses all the schemas for the input/output in the system.
The serializers are used to generate and validate any raw data (such as JSON)
going in and out of the system, including the persisted application state.
"""

from .fields import EnumField, Many
from .geojson import GeoJSONType, GeoJSON, GeometryType, Geometry
from .jsend import JSendSchema, JSendStatus, failure
from .decorators import expects, returns
