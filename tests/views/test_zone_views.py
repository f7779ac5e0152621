from bikerent.config import api_root
from tests.util import TRG_REPUBLIKE, FAR_AWAY


async def test_get_zones(client):
    response = await client.get(f"{api_root}/zones")
    zones = (await response.json())["data"]["zones"]

    assert response.status == 200
    assert [zone["properties"]["id"] for zone in zones] == ["pz_1", "pz_2"]
    assert zones[0]["geometry"] == {"type": "Point", "coordinates": [TRG_REPUBLIKE[1], TRG_REPUBLIKE[0]]}


async def test_get_zone(client):
    response = await client.get(f"{api_root}/zones/pz_2")
    zone = (await response.json())["data"]["zone"]
    assert zone["properties"]["name"] == "Kalemegdan"
    assert zone["properties"]["radius_meters"] == 220


async def test_get_missing_zone(client):
    response = await client.get(f"{api_root}/zones/pz_404")
    assert response.status == 404


class TestNearestZoneView:

    async def test_inside(self, client):
        lat, lng = TRG_REPUBLIKE
        response = await client.get(f"{api_root}/zones/nearest", params={"lat": lat, "lng": lng})
        data = (await response.json())["data"]

        assert response.status == 200
        assert data["inside"]
        assert data["zone"]["properties"]["id"] == "pz_1"
        assert data["zone"]["properties"]["distance"] == 0

    async def test_outside(self, client):
        lat, lng = FAR_AWAY
        response = await client.get(f"{api_root}/zones/nearest", params={"lat": lat, "lng": lng})
        data = (await response.json())["data"]

        assert not data["inside"]
        assert data["zone"]["properties"]["distance"] > 1000

    async def test_missing_location(self, client):
        response = await client.get(f"{api_root}/zones/nearest")
        assert response.status == 400

    async def test_bad_location(self, client):
        response = await client.get(f"{api_root}/zones/nearest", params={"lat": "north", "lng": 20})
        assert response.status == 400
