"""Mini README: Tests for the FastAPI control panel.

Each test builds its own application around an explicit network so state
never leaks between tests. Snapshot endpoints write into ``tmp_path``.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from flightnet.configuration import FlightnetSettings
from flightnet.interface import create_application
from flightnet.network import FlightNetwork, build_demo_network


@pytest.fixture()
def settings(tmp_path) -> FlightnetSettings:
    return FlightnetSettings(data_directory=tmp_path, seed_demo_network=False)


@pytest.fixture()
def client(settings) -> TestClient:
    return TestClient(create_application(network=build_demo_network(), settings=settings))


def test_lists_airports_sorted(client: TestClient) -> None:
    response = client.get("/airports")
    assert response.status_code == 200
    codes = [airport["code"] for airport in response.json()["airports"]]
    assert codes == sorted(codes)
    assert "JFK" in codes


def test_add_airport_and_reject_duplicate(client: TestClient) -> None:
    payload = {"code": " ams ", "name": "Schiphol", "country": "Netherlands", "latitude": 52.31, "longitude": 4.76}
    created = client.post("/airports", data=payload)
    assert created.status_code == 201
    assert created.json()["airport"]["code"] == "AMS"

    duplicate = client.post("/airports", data=payload)
    assert duplicate.status_code == 400


def test_add_airport_validates_coordinates(client: TestClient) -> None:
    payload = {"code": "BAD", "name": "Bad", "country": "Nowhere", "latitude": 123.0, "longitude": 0.0}
    assert client.post("/airports", data=payload).status_code == 422


def test_remove_airport_cascades(client: TestClient) -> None:
    assert client.delete("/airports/LHR").status_code == 200
    assert client.delete("/airports/LHR").status_code == 404
    routes = client.get("/airports/JFK/routes").json()["routes"]
    assert all(route["destination"] != "LHR" for route in routes)


def test_routes_for_unknown_airport_are_empty(client: TestClient) -> None:
    response = client.get("/airports/NOPE/routes")
    assert response.status_code == 200
    assert response.json()["routes"] == []


def test_add_and_remove_routes(client: TestClient) -> None:
    created = client.post("/routes", data={"origin": "LHR", "destination": "JFK", "cost": 480})
    assert created.status_code == 201
    assert created.json()["route"]["distance_km"] > 5000

    assert client.post("/routes", data={"origin": "LHR", "destination": "XXX", "cost": 1}).status_code == 400
    assert client.delete("/routes", params={"origin": "LHR", "destination": "JFK"}).status_code == 200
    assert client.delete("/routes", params={"origin": "LHR", "destination": "JFK"}).status_code == 404


def test_find_path_returns_totals(client: TestClient) -> None:
    response = client.get("/find-path", params={"start": "JFK", "end": "LHR", "metric": "cost"})
    assert response.status_code == 200
    body = response.json()
    assert body["stops"] == ["JFK", "LHR"]
    assert body["total_cost"] == pytest.approx(500.0)
    assert body["description"].startswith("Total: $500.00")


def test_find_path_not_found_and_bad_metric(client: TestClient) -> None:
    missing = client.get("/find-path", params={"start": "JFK", "end": "XXX"})
    assert missing.status_code == 404
    assert missing.json()["detail"] == "No route found"

    bad_metric = client.get("/find-path", params={"start": "JFK", "end": "LHR", "metric": "speed"})
    assert bad_metric.status_code == 400


def test_direct_only_search(client: TestClient) -> None:
    params = {"start": "JFK", "end": "NRT", "direct_only": "true"}
    assert client.get("/find-path", params=params).status_code == 404


def test_map_highlights_path(client: TestClient) -> None:
    body = client.get("/map", params={"start": "JFK", "end": "NRT"}).json()
    highlighted = [
        feature
        for feature in body["features"]
        if feature["properties"]["kind"] == "route" and feature["properties"]["highlighted"]
    ]
    assert highlighted
    assert highlighted[-1]["properties"]["destination"] == "NRT"


def test_snapshot_save_and_load(settings: FlightnetSettings) -> None:
    network = build_demo_network()
    client = TestClient(create_application(network=network, settings=settings))

    assert client.post("/snapshot/load").status_code == 404
    saved = client.post("/snapshot/save")
    assert saved.status_code == 200
    assert saved.json()["airports"] == len(network)

    client.delete("/airports/JFK")
    loaded = client.post("/snapshot/load")
    assert loaded.status_code == 200
    codes = [airport["code"] for airport in client.get("/airports").json()["airports"]]
    assert "JFK" in codes


def test_invalid_snapshot_is_rejected(settings: FlightnetSettings) -> None:
    settings.snapshot_path.write_text("{broken", encoding="utf-8")
    client = TestClient(create_application(network=FlightNetwork(), settings=settings))
    assert client.post("/snapshot/load").status_code == 400


def test_empty_network_when_seeding_disabled(settings: FlightnetSettings) -> None:
    client = TestClient(create_application(settings=settings))
    assert client.get("/airports").json()["airports"] == []


def test_binary_snapshot_is_rejected(settings: FlightnetSettings) -> None:
    settings.snapshot_path.write_bytes(b"\xff\xfe\x00garbage")
    client = TestClient(create_application(network=FlightNetwork(), settings=settings))
    assert client.post("/snapshot/load").status_code == 400
