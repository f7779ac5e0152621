"""
The geo module answers the only spatial questions the rental engine asks:
how far apart two points are, whether a point lies in a parking zone, and
which parking zone is closest to a point.

Distances are great-circle distances on a sphere of the Earth's mean radius,
which is accurate to well within a parking zone's radius at city scale.
"""

from typing import Iterable, Optional, Tuple

from geopy.distance import great_circle

from bikerent.models import Location, ParkingZone

EARTH_MEAN_RADIUS_KM = 6371.0088
"""The IUGG mean radius of the Earth."""


def distance_meters(a: Location, b: Location) -> float:
    """
    Gets the great-circle distance between two locations.

    :return: The distance in meters. Symmetric, and zero for identical points.
    """
    if a == b:
        return 0.0
    a, b = sorted((a, b), key=lambda location: (location.lat, location.lng))
    return great_circle((a.lat, a.lng), (b.lat, b.lng), radius=EARTH_MEAN_RADIUS_KM).meters


def is_inside(point: Location, zone: ParkingZone) -> bool:
    """Checks whether the point lies in the zone. The boundary counts as inside."""
    return distance_meters(point, zone.center) <= zone.radius_meters


def nearest(point: Location, zones: Iterable[ParkingZone]) -> Optional[Tuple[ParkingZone, float]]:
    """
    Finds the zone whose center is closest to the point.

    On an exact tie the zone that comes first wins.

    :return: The zone and its distance in meters, or None if there are no zones.
    """
    best = None
    for zone in zones:
        distance = distance_meters(point, zone.center)
        if best is None or distance < best[1]:
            best = (zone, distance)
    return best


def containing_zone(point: Location, zones: Iterable[ParkingZone]) -> Optional[Tuple[ParkingZone, float]]:
    """Finds the first zone that contains the point, along with the distance to its center."""
    for zone in zones:
        distance = distance_meters(point, zone.center)
        if distance <= zone.radius_meters:
            return zone, distance
    return None
