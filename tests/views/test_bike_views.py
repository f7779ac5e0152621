from bikerent.config import api_root
from bikerent.models import BikeStatus


class TestBikesView:

    async def test_get_bikes(self, client):
        response = await client.get(f"{api_root}/bikes")
        response_data = await response.json()

        assert response.status == 200
        assert response_data["status"] == "success"
        assert [bike["id"] for bike in response_data["data"]["bikes"]] == ["bike_1", "bike_2", "bike_3"]

    async def test_get_bikes_by_status(self, client):
        response = await client.get(f"{api_root}/bikes", params={"status": "maintenance"})
        response_data = await response.json()
        assert [bike["id"] for bike in response_data["data"]["bikes"]] == ["bike_3"]

    async def test_get_bikes_bad_status(self, client):
        response = await client.get(f"{api_root}/bikes", params={"status": "stolen"})
        response_data = await response.json()
        assert response.status == 400
        assert response_data["data"]["error"] == "ValidationError"


class TestBikeView:

    async def test_get_bike(self, client):
        response = await client.get(f"{api_root}/bikes/bike_1")
        bike = (await response.json())["data"]["bike"]

        assert response.status == 200
        assert bike["label"] == "BG-001"
        assert bike["available"]
        assert bike["current_location"]["geometry"]["coordinates"] == [20.46, 44.8158]

    async def test_get_missing_bike(self, client):
        response = await client.get(f"{api_root}/bikes/bike_404")
        response_data = await response.json()
        assert response.status == 404
        assert response_data["data"]["error"] == "NotFoundError"

    async def test_override_requires_admin(self, client):
        response = await client.patch(f"{api_root}/bikes/bike_1", json={"status": "maintenance"})
        assert response.status == 401

    async def test_override_status(self, client, admin_headers):
        response = await client.patch(
            f"{api_root}/bikes/bike_1", json={"status": "maintenance"}, headers=admin_headers
        )
        response_data = await response.json()

        assert response.status == 200
        assert response_data["data"]["bike"]["status"] == "maintenance"
        bike, = (bike for bike in client.app["state_manager"].state.bikes if bike.id == "bike_1")
        assert bike.status is BikeStatus.MAINTENANCE

    async def test_override_rented_bike(self, client, admin_headers):
        await client.post(f"{api_root}/bikes/bike_1/rentals", json={"user_id": "user_1"})

        response = await client.patch(
            f"{api_root}/bikes/bike_1", json={"status": "available"}, headers=admin_headers
        )
        assert response.status == 409

    async def test_override_invalid_body(self, client, admin_headers):
        response = await client.patch(f"{api_root}/bikes/bike_1", data="status", headers=admin_headers)
        response_data = await response.json()
        assert response.status == 400
        assert "schema" in response_data["data"]

    async def test_invalid_token(self, client):
        response = await client.get(f"{api_root}/bikes/bike_1", headers={"Authorization": "Bearer nope"})
        response_data = await response.json()
        assert response.status == 401
        assert response_data["data"]["error"] == "Unauthorized"


class TestBikeRentalsView:

    async def test_start_rental(self, client):
        response = await client.post(
            f"{api_root}/bikes/bike_1/rentals", json={"user_id": "user_1", "lat": 44.8158, "lng": 20.46}
        )
        rental = (await response.json())["data"]["rental"]

        assert response.status == 201
        assert rental["is_active"]
        assert rental["estimated_price"] == 0.0
        assert rental["start_location"]["geometry"]["coordinates"] == [20.46, 44.8158]

    async def test_start_rental_unavailable(self, client):
        response = await client.post(f"{api_root}/bikes/bike_3/rentals", json={"user_id": "user_1"})
        response_data = await response.json()
        assert response.status == 409
        assert response_data["data"]["error"] == "BikeUnavailableError"

    async def test_start_second_rental(self, client):
        first = await client.post(f"{api_root}/bikes/bike_1/rentals", json={"user_id": "user_1"})
        rental_id = (await first.json())["data"]["rental"]["id"]

        response = await client.post(f"{api_root}/bikes/bike_2/rentals", json={"user_id": "user_1"})
        response_data = await response.json()
        assert response.status == 409
        assert response_data["data"]["error"] == "AlreadyActiveError"
        assert response_data["data"]["rental_id"] == rental_id

    async def test_start_rental_unknown_user(self, client):
        response = await client.post(f"{api_root}/bikes/bike_1/rentals", json={"user_id": "user_404"})
        response_data = await response.json()

        assert response.status == 404
        assert response_data["data"]["error"] == "NotFoundError"
        assert not client.app["state_manager"].state.rentals

    async def test_start_rental_missing_bike(self, client):
        response = await client.post(f"{api_root}/bikes/bike_404/rentals", json={"user_id": "user_1"})
        assert response.status == 404

    async def test_start_rental_one_coordinate(self, client):
        response = await client.post(f"{api_root}/bikes/bike_1/rentals", json={"user_id": "user_1", "lat": 44.8})
        assert response.status == 400

    async def test_get_bike_rentals(self, client, admin_headers):
        await client.post(f"{api_root}/bikes/bike_1/rentals", json={"user_id": "user_1"})

        response = await client.get(f"{api_root}/bikes/bike_1/rentals", headers=admin_headers)
        rentals = (await response.json())["data"]["rentals"]
        assert [rental["user_id"] for rental in rentals] == ["user_1"]
