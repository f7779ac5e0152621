"""
Parking Zone
---------------------------

A circular area bikes must be returned into. Capacity is advisory only.
"""

from typing import Dict, Any, Optional

from attr import dataclass, attrib
from shapely.geometry import mapping

from bikerent.models.location import Location
from bikerent.models.util import in_range
from bikerent.serializer.geojson import GeoJSONType

DEFAULT_CAPACITY = 10


@dataclass(frozen=True)
class ParkingZone:
    id: str
    name: str
    lat: float = attrib(converter=float, validator=in_range(-90, 90))
    lng: float = attrib(converter=float, validator=in_range(-180, 180))
    radius_meters: float = attrib(converter=float, validator=in_range(1, 1000))
    capacity: int = DEFAULT_CAPACITY

    @property
    def center(self) -> Location:
        return Location(self.lat, self.lng)

    def serialize(self, distance: Optional[float] = None) -> Dict[str, Any]:
        """
        Serializes the zone as a GeoJSON feature centered on the zone.

        :param distance: The optional distance (in meters) from some point of interest.
        """
        data = {
            "type": GeoJSONType.FEATURE,
            "geometry": mapping(self.center.point),
            "properties": {
                "id": self.id,
                "name": self.name,
                "center": [self.lng, self.lat],
                "radius_meters": self.radius_meters,
                "capacity": self.capacity,
            }
        }

        if distance is not None:
            data["properties"]["distance"] = distance

        return data

    def __str__(self):
        return f"{self.name} ({self.radius_meters}m)"
