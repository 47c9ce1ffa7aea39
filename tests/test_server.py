from __future__ import annotations

import asyncio
import dataclasses

from fastapi.testclient import TestClient

from seatmap_server.config import Settings
from seatmap_server.fixtures import DEMO_FLIGHT_ID
from seatmap_server.server import create_app

from tests.factories import FLIGHT_ID


class LoopRecordingService:
    """Records whether each call ran on a thread with a running event loop."""

    def __init__(self, inner):
        self.inner = inner
        self.on_event_loop = []

    def __getattr__(self, name):
        method = getattr(self.inner, name)

        def _call(*args, **kwargs):
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                self.on_event_loop.append(False)
            else:
                self.on_event_loop.append(True)
            return method(*args, **kwargs)

        return _call


class Exploding:
    def __getattr__(self, name):
        def _raise(*args, **kwargs):
            raise RuntimeError("boom")

        return _raise


def test_health(client):
    for path in ("/healthz", "/api/health"):
        resp = client.get(path)
        assert resp.status_code == 200
        assert resp.json() == {"error": None, "status": "ok"}


def test_seat_map_endpoint_returns_bare_document(client):
    resp = client.get("/api/seats/map", params={"flightId": FLIGHT_ID, "passengerId": "7"})

    assert resp.status_code == 200
    body = resp.json()
    assert sorted(body) == ["seatsItineraryParts", "selectedSeats"]
    cabin = body["seatsItineraryParts"][0]["segmentSeatMaps"][0]["passengerSeatMaps"][0]["seatMap"]["cabins"][0]
    assert [r["rowNumber"] for r in cabin["seatRows"]] == [10, 11, 12]


def test_seat_map_requires_flight_id(client):
    resp = client.get("/api/seats/map")

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_FAILED"
    assert resp.json()["error"]["message"] == "Flight ID is required"
    assert sorted(resp.json()) == ["error"]


def test_seat_map_unknown_flight_is_404(client):
    resp = client.get("/api/seats/map", params={"flightId": "NOPE"})

    assert resp.status_code == 404
    body = resp.json()
    assert body["error"]["code"] == "FLIGHT_NOT_FOUND"
    assert "seatsItineraryParts" not in body


def test_seat_map_gateway_failure_is_500(gateways):
    app = create_app(Settings(seed_demo=False), gateways=dataclasses.replace(gateways, cabins=Exploding()))
    resp = TestClient(app).get("/api/seats/map", params={"flightId": FLIGHT_ID})

    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "INTERNAL_ERROR"


def test_unexpected_exception_is_guarded(gateways):
    app = create_app(Settings(seed_demo=False), gateways=gateways)
    app.state.service = Exploding()

    resp = TestClient(app).get("/api/seats/map", params={"flightId": FLIGHT_ID})

    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "INTERNAL_ERROR"
    assert resp.json()["error"]["details"] is None


def test_debug_mode_exposes_exception_details(gateways):
    app = create_app(Settings(seed_demo=False, debug=True), gateways=gateways)
    app.state.service = Exploding()

    resp = TestClient(app).get("/api/seats/map", params={"flightId": FLIGHT_ID})

    assert resp.json()["error"]["details"] == {"type": "RuntimeError", "message": "boom"}


def test_request_id_is_echoed_or_generated(client):
    resp = client.get("/healthz", headers={"X-Request-Id": "abc-123"})
    assert resp.headers["X-Request-Id"] == "abc-123"

    resp = client.get("/healthz")
    assert resp.headers["X-Request-Id"].startswith("req-")


def test_get_seat(client):
    resp = client.get("/api/seats/s-10A")

    assert resp.status_code == 200
    body = resp.json()
    assert body["seat"]["code"] == "10A"
    assert body["price"]["amount"] == 25.0

    assert client.get("/api/seats/nope").status_code == 404


def test_update_availability(client):
    resp = client.put("/api/seats/s-10A/availability", json={"available": False})

    assert resp.status_code == 200
    assert resp.json()["seat"]["available"] is False
    assert client.get("/api/seats/s-10A").json()["seat"]["available"] is False

    doc = client.get("/api/seats/map", params={"flightId": FLIGHT_ID}).json()
    row10 = doc["seatsItineraryParts"][0]["segmentSeatMaps"][0]["passengerSeatMaps"][0]["seatMap"]["cabins"][0]["seatRows"][0]
    assert row10["seats"][1]["available"] is False


def test_update_availability_validation(client):
    assert client.put("/api/seats/s-10A/availability", json={"available": "no"}).status_code == 400
    assert client.put("/api/seats/s-10A/availability", content=b"not json").status_code == 400
    assert client.put("/api/seats/nope/availability", json={"available": True}).status_code == 404


def test_flight_and_row_seats(client):
    flight = client.get(f"/api/flights/{FLIGHT_ID}/seats").json()
    assert sorted(s["seat"]["code"] for s in flight["seats"]) == ["10A", "10C", "11B"]

    row = client.get("/api/rows/row-10/seats").json()
    assert sorted(s["seat"]["code"] for s in row["seats"]) == ["10A", "10C"]


def test_demo_app_serves_demo_flight(demo_client):
    resp = demo_client.get("/api/seats/map", params={"flightId": DEMO_FLIGHT_ID, "passengerId": "1"})

    assert resp.status_code == 200
    psm = resp.json()["seatsItineraryParts"][0]["segmentSeatMaps"][0]["passengerSeatMaps"][0]
    assert psm["seatMap"]["aircraft"] == "B738"
    assert psm["passenger"]["passengerDetails"]["firstName"] == "Jane"
    cabins = psm["seatMap"]["cabins"]
    assert [(c["firstRow"], c["lastRow"]) for c in cabins] == [(1, 4), (5, 30)]
    economy = cabins[1]
    row13 = next(r for r in economy["seatRows"] if r["rowNumber"] == 13)
    assert row13["seatCodes"] == []
    assert len(row13["seats"]) == 8


def test_synthetic_mode_from_settings():
    app = create_app(Settings(seed_demo=True, synthetic=True))
    resp = TestClient(app).get("/api/seats/map", params={"flightId": "anything"})

    assert resp.status_code == 200
    cabin = resp.json()["seatsItineraryParts"][0]["segmentSeatMaps"][0]["passengerSeatMaps"][0]["seatMap"]["cabins"][0]
    assert cabin["deck"] == "MAIN"
    assert cabin["lastRow"] == 30


def test_service_calls_run_off_the_event_loop(gateways):
    app = create_app(Settings(seed_demo=False), gateways=gateways)
    recorder = LoopRecordingService(app.state.service)
    app.state.service = recorder
    client = TestClient(app)

    assert client.get("/api/seats/map", params={"flightId": FLIGHT_ID}).status_code == 200
    assert client.get("/api/seats/s-10A").status_code == 200
    assert client.put("/api/seats/s-10A/availability", json={"available": True}).status_code == 200
    assert client.get(f"/api/flights/{FLIGHT_ID}/seats").status_code == 200
    assert client.get("/api/rows/row-10/seats").status_code == 200

    assert recorder.on_event_loop == [False] * 5
