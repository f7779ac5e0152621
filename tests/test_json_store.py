import json
import os

import pytest
from attr import evolve

from bikerent.models import BikeStatus
from bikerent.service.exceptions import StateLoadError
from bikerent.store.json_store import JsonFileStore, default_state


@pytest.fixture
def path(tmp_path):
    return str(tmp_path / "data" / "state.json")


def test_missing_file_seeds_default(path):
    state = JsonFileStore(path).load()
    assert len(state.bikes) == 10
    assert {zone.id for zone in state.parking_zones} >= {"pz_1", "pz_bilecka"}
    assert state.bikes[8].status is BikeStatus.MAINTENANCE
    assert state.bikes[9].status is BikeStatus.DISABLED
    assert not state.users


def test_save_and_load(path, initial_state):
    store = JsonFileStore(path)
    store.save(initial_state)
    assert store.load() == initial_state
    assert [name for name in os.listdir(os.path.dirname(path))] == ["state.json"]


def test_save_replaces(path, initial_state):
    store = JsonFileStore(path)
    store.save(initial_state)
    store.save(evolve(initial_state, bikes=initial_state.bikes[:1]))
    assert [bike.id for bike in store.load().bikes] == ["bike_1"]


def test_file_format(path, initial_state):
    JsonFileStore(path).save(initial_state)
    with open(path, encoding="utf-8") as state_file:
        raw = json.load(state_file)

    assert raw["parkingZones"][0]["radiusMeters"] == 180
    assert raw["bikes"][0]["pricePerHour"] == 120
    assert "currentUserId" not in raw


def test_zone_without_capacity(path):
    with open(_prepare(path), "w", encoding="utf-8") as state_file:
        json.dump({"parkingZones": [{"id": "pz_9", "name": "Old", "lat": 44.8, "lng": 20.4, "radiusMeters": 100}]},
                  state_file)

    zone, = JsonFileStore(path).load().parking_zones
    assert zone.capacity == 10


@pytest.mark.parametrize("content", ["{not json", '{"bikes": [{"id": "bike_1"}]}'])
def test_corrupt_file(path, content):
    with open(_prepare(path), "w", encoding="utf-8") as state_file:
        state_file.write(content)

    with pytest.raises(StateLoadError):
        JsonFileStore(path).load()


def test_default_state_is_consistent():
    state = default_state()
    assert len({bike.id for bike in state.bikes}) == len(state.bikes)
    assert all(zone.capacity > 0 for zone in state.parking_zones)


def _prepare(path):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    return path
