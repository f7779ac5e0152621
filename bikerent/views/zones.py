"""
Parking Zone Related Views
---------------------------

Parking zones are where bikes may be returned. They are sent as
GeoJSON features centered on the zone.
"""

from aiohttp_apispec import docs
from marshmallow import ValidationError
from marshmallow.fields import Boolean

from bikerent.models import ParkingZone, Location
from bikerent.serializer import JSendSchema, JSendStatus, failure
from bikerent.serializer.decorators import returns
from bikerent.serializer.fields import Many
from bikerent.serializer.misc import LocationSchema
from bikerent.serializer.models import ParkingZoneSchema
from bikerent.service.access import get_zone, ParkingZoneIndex
from bikerent.views.base import BaseView
from bikerent.views.decorators import match_getter
from bikerent.views.utils import error_responses

ZONE_IDENTIFIER_REGEX = "(?!nearest)[^{}/]+"


class ZonesView(BaseView):
    url = "/zones"
    name = "zones"

    @docs(summary="Get All Parking Zones")
    @returns(JSendSchema.of(zones=Many(ParkingZoneSchema())))
    async def get(self):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"zones": [zone.serialize() for zone in self.state.parking_zones]}
        }


class ZoneView(BaseView):
    url = f"/zones/{{id:{ZONE_IDENTIFIER_REGEX}}}"
    name = "zone"
    with_zone = match_getter(get_zone, 'zone', zone_id='id')

    @with_zone
    @docs(summary="Get A Parking Zone")
    @returns(JSendSchema.of(zone=ParkingZoneSchema()))
    async def get(self, zone: ParkingZone):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"zone": zone.serialize()}
        }


class NearestZoneView(BaseView):
    """
    Finds the parking zone closest to ``?lat=&lng=``, and
    whether that location is already inside a zone.
    """
    url = "/zones/nearest"
    name = "nearest_zone"
    location_schema = LocationSchema()

    @docs(summary="Find The Nearest Parking Zone")
    @returns(nearest=JSendSchema.of(zone=ParkingZoneSchema(), inside=Boolean()), **error_responses)
    async def get(self):
        try:
            data = self.location_schema.load(dict(self.request.query))
        except ValidationError as error:
            return "bad_request", failure("Supply a valid lat and lng.", "ValidationError", errors=error.messages)
        if "lat" not in data:
            return "bad_request", failure("Supply a valid lat and lng.", "ValidationError")

        location = Location(data["lat"], data["lng"])
        zones = ParkingZoneIndex(self.state.parking_zones)
        nearest = zones.nearest(location)
        if nearest is None:
            return "not_found", failure("There are no parking zones.", "NotFoundError")

        zone, distance = nearest
        return "nearest", {
            "status": JSendStatus.SUCCESS,
            "data": {"zone": zone.serialize(distance=distance), "inside": zones.containing(location) is not None}
        }
