"""
Rental
---------------------------

A rental is opened once and closed once. A closed rental
is part of the history and is never modified again.
"""

from typing import Dict, Any, Optional

from attr import dataclass, attrib
from shapely.geometry import mapping

from bikerent.models.location import Location
from bikerent.models.util import RentalStatus
from bikerent.serializer.geojson import GeoJSONType


@dataclass(frozen=True)
class Rental:
    id: str
    user_id: str
    bike_id: str
    start_at: int
    status: RentalStatus = attrib(converter=RentalStatus, default=RentalStatus.ACTIVE)
    end_at: Optional[int] = None
    start_lat: Optional[float] = None
    start_lng: Optional[float] = None
    end_lat: Optional[float] = None
    end_lng: Optional[float] = None
    total_price: Optional[float] = None
    """The price of the rental, set when it is finished."""
    return_photo: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status is RentalStatus.ACTIVE

    @property
    def start_location(self) -> Optional[Location]:
        return Location.maybe(self.start_lat, self.start_lng)

    @property
    def end_location(self) -> Optional[Location]:
        return Location.maybe(self.end_lat, self.end_lng)

    def serialize(self, estimated_price: float = None) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "bike_id": self.bike_id,
            "status": self.status,
            "start_time": self.start_at,
            "is_active": self.is_active,
        }

        if not self.is_active:
            data["end_time"] = self.end_at
            data["price"] = self.total_price
            data["return_photo"] = self.return_photo
        elif estimated_price is not None:
            data["estimated_price"] = estimated_price

        for key, location in (("start_location", self.start_location), ("end_location", self.end_location)):
            if location is not None:
                data[key] = {
                    "type": GeoJSONType.FEATURE,
                    "geometry": mapping(location.point)
                }

        return data
