import pytest
from geopy.distance import great_circle

from bikerent import geo
from bikerent.models import Location, ParkingZone

CENTER = Location(44.8166, 20.4602)


def north_of(location: Location, meters: float) -> Location:
    """The point the given distance due north, on the same sphere the engine measures on."""
    destination = great_circle(meters=meters, radius=geo.EARTH_MEAN_RADIUS_KM).destination(
        (location.lat, location.lng), bearing=0
    )
    return Location(destination.latitude, destination.longitude)


@pytest.fixture
def zone():
    return ParkingZone("pz_1", "Trg Republike", CENTER.lat, CENTER.lng, radius_meters=180)


class TestDistance:

    def test_identical_points(self):
        assert geo.distance_meters(CENTER, Location(CENTER.lat, CENTER.lng)) == 0

    def test_symmetric(self):
        other = Location(44.8231, 20.4502)
        assert geo.distance_meters(CENTER, other) == geo.distance_meters(other, CENTER)

    def test_known_distance(self):
        """Trg Republike to Kalemegdan is a little over a kilometer."""
        distance = geo.distance_meters(CENTER, Location(44.8231, 20.4502))
        assert 1000 < distance < 1100

    def test_monotonic(self):
        distances = [geo.distance_meters(CENTER, north_of(CENTER, meters)) for meters in (10, 100, 1000, 10000)]
        assert distances == sorted(distances)


class TestGeofence:

    def test_center_is_inside(self, zone):
        assert geo.is_inside(CENTER, zone)

    def test_radius_is_inside(self):
        edge = north_of(CENTER, 180)
        zone = ParkingZone("pz_edge", "Edge", CENTER.lat, CENTER.lng, radius_meters=geo.distance_meters(edge, CENTER))
        assert geo.is_inside(edge, zone)

    def test_radius_plus_one_meter_is_outside(self, zone):
        assert not geo.is_inside(north_of(CENTER, zone.radius_meters + 1), zone)

    def test_containing_zone_first_match(self, zone):
        overlapping = ParkingZone("pz_2", "Overlap", CENTER.lat, CENTER.lng, radius_meters=500)
        found, distance = geo.containing_zone(CENTER, [zone, overlapping])
        assert found is zone
        assert distance == 0

    def test_containing_zone_none(self, zone):
        assert geo.containing_zone(Location(44.9, 20.9), [zone]) is None


class TestNearest:

    def test_no_zones(self):
        assert geo.nearest(CENTER, []) is None

    def test_nearest(self, zone):
        far = ParkingZone("pz_far", "Far", 44.9, 20.9, radius_meters=100)
        found, distance = geo.nearest(north_of(CENTER, 500), [far, zone])
        assert found is zone
        assert distance == pytest.approx(500, abs=0.01)

    def test_tie_first_wins(self, zone):
        twin = ParkingZone("pz_twin", "Twin", CENTER.lat, CENTER.lng, radius_meters=50)
        found, _ = geo.nearest(Location(44.9, 20.9), [zone, twin])
        assert found is zone
