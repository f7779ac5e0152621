from bikerent.config import api_root


async def test_stats(client, admin_headers):
    await client.post(f"{api_root}/bikes/bike_1/rentals", json={"user_id": "user_1"})

    response = await client.get(f"{api_root}/stats", headers=admin_headers)
    stats = (await response.json())["data"]["stats"]

    assert response.status == 200
    assert stats["bikes"]["total"] == 3
    assert stats["bikes"]["rented"] == 1
    assert stats["rentals"]["active"] == 1
    assert stats["users"]["total"] == 2


async def test_stats_requires_admin(client):
    response = await client.get(f"{api_root}/stats")
    assert response.status == 401
