"""
Bike
-------------------------

Represents a bike in the fleet. The status of the bike is only moved
in and out of ``rented`` by the :class:`~bikerent.service.manager.rental_manager.RentalManager`;
the remaining states are set by fleet management.
"""

from typing import Dict, Any

from attr import dataclass, attrib
from shapely.geometry import mapping

from bikerent.models.location import Location
from bikerent.models.util import BikeType, BikeStatus, positive, in_range
from bikerent.serializer.geojson import GeoJSONType


@dataclass(frozen=True)
class Bike:
    id: str
    label: str
    type: BikeType = attrib(converter=BikeType)
    price_per_hour: float = attrib(converter=float, validator=positive)
    lat: float = attrib(converter=float, validator=in_range(-90, 90))
    lng: float = attrib(converter=float, validator=in_range(-180, 180))
    status: BikeStatus = attrib(converter=BikeStatus, default=BikeStatus.AVAILABLE)
    updated_at: int = 0

    @property
    def location(self) -> Location:
        return Location(self.lat, self.lng)

    @property
    def available(self) -> bool:
        return self.status is BikeStatus.AVAILABLE

    def serialize(self) -> Dict[str, Any]:
        """
        Serializes the bike into a format that can be turned into JSON.
        The location is sent as a GeoJSON feature.
        """
        return {
            "id": self.id,
            "label": self.label,
            "type": self.type,
            "price_per_hour": self.price_per_hour,
            "status": self.status,
            "available": self.available,
            "updated_at": self.updated_at,
            "current_location": {
                "type": GeoJSONType.FEATURE,
                "geometry": mapping(self.location.point),
            }
        }

    def __str__(self):
        return f"[{self.type.value}] {self.label}"
