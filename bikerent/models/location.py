"""
Location
---------------------------
"""

from typing import Optional

from attr import dataclass, attrib
from shapely.geometry import Point

from bikerent.models.util import in_range


@dataclass(frozen=True)
class Location:
    """
    A point-in-time position on the globe.
    Latitude comes first, as it does on the wire.
    """

    lat: float = attrib(converter=float, validator=in_range(-90, 90))
    lng: float = attrib(converter=float, validator=in_range(-180, 180))

    @property
    def point(self) -> Point:
        """The shapely point (x is longitude) used for GeoJSON output."""
        return Point(self.lng, self.lat)

    @classmethod
    def maybe(cls, lat: Optional[float], lng: Optional[float]) -> Optional['Location']:
        """Builds a location only when both coordinates are known."""
        if lat is None or lng is None:
            return None
        return cls(lat, lng)

    def __str__(self):
        return f"({self.lat}, {self.lng})"
