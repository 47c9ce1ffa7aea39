from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from seatmap_server.config import Settings
from seatmap_server.engine.service import SeatMapService
from seatmap_server.fixtures import seed_demo_data
from seatmap_server.gateways import SeatMapGateways
from seatmap_server.models import Aircraft, Cabin, Flight, Passenger, SeatPrice, SeatRow
from seatmap_server.server import create_app
from seatmap_server.state import SeatMapStore

from tests.factories import FLIGHT_ID, make_seat


@pytest.fixture
def store() -> SeatMapStore:
    """Small flight: one cabin rows 10-12, columns A B C, row records present."""

    s = SeatMapStore()
    s.add_aircraft(Aircraft(id="ac-1", code="A320", name="Airbus A320"))
    s.add_flight(Flight(id=FLIGHT_ID, equipment="A320", segment_id=FLIGHT_ID))
    s.add_cabin(
        Cabin(
            id="cab-1",
            aircraft_id="ac-1",
            segment_id=FLIGHT_ID,
            deck="MAIN",
            first_row=10,
            last_row=12,
            seat_columns="A,B,C",
        )
    )
    for n in (10, 11):
        s.add_row(SeatRow(id=f"row-{n}", cabin_id="cab-1", row_number=n))

    s.add_seat(
        make_seat("10A", row_id="row-10", seat_characteristics="WINDOW,EXIT_ROW", fee_waived=True),
        price=SeatPrice(id="p-10A", seat_id="s-10A", amount=25.0),
    )
    s.add_seat(make_seat("10C", row_id="row-10", available=False), price=SeatPrice(id="p-10C", seat_id="s-10C", amount=0.0))
    s.add_seat(make_seat("11B", row_id="row-11", originally_selected=True))
    s.add_passenger(
        Passenger(
            id="7",
            passenger_index=2,
            passenger_name_number="02.01",
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
        )
    )
    return s


@pytest.fixture
def gateways(store: SeatMapStore) -> SeatMapGateways:
    return SeatMapGateways.from_store(store)


@pytest.fixture
def service(gateways: SeatMapGateways) -> SeatMapService:
    return SeatMapService(gateways)


@pytest.fixture
def client(gateways: SeatMapGateways) -> TestClient:
    app = create_app(Settings(seed_demo=False), gateways=gateways)
    return TestClient(app)


@pytest.fixture
def demo_client() -> TestClient:
    return TestClient(create_app(Settings(seed_demo=True)))


@pytest.fixture
def demo_store() -> SeatMapStore:
    s = SeatMapStore()
    seed_demo_data(s)
    return s
