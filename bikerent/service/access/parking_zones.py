"""
Parking Zones
=============

Parking zones are only ever read by the rental engine.
"""

from typing import Tuple, Optional

from attr import dataclass, attrib

from bikerent import geo
from bikerent.models import ParkingZone, Location


@dataclass(frozen=True)
class ParkingZoneIndex:
    zones: Tuple[ParkingZone, ...] = attrib(factory=tuple, converter=tuple)

    def all(self) -> Tuple[ParkingZone, ...]:
        return self.zones

    def get(self, zone_id: str) -> Optional[ParkingZone]:
        return next((zone for zone in self.zones if zone.id == zone_id), None)

    def nearest(self, location: Location) -> Optional[Tuple[ParkingZone, float]]:
        """Gets the closest zone and its distance in meters."""
        return geo.nearest(location, self.zones)

    def containing(self, location: Location) -> Optional[Tuple[ParkingZone, float]]:
        """Gets the first zone the location is inside of."""
        return geo.containing_zone(location, self.zones)


def get_zone(state, zone_id: str) -> Optional[ParkingZone]:
    return ParkingZoneIndex(state.parking_zones).get(zone_id)
