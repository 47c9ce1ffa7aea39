from __future__ import annotations

import json

from seatmap_server.engine.service import SeatMapService
from seatmap_server.engine.synthetic import build_synthetic_map
from seatmap_server.gateways import SeatMapGateways
from seatmap_server.seat_map import LEFT_SIDE, RIGHT_SIDE


def _cabin(doc: dict) -> dict:
    psm = doc["seatsItineraryParts"][0]["segmentSeatMaps"][0]["passengerSeatMaps"][0]
    return psm["seatMap"]["cabins"][0]


def _seat(cabin: dict, row_number: int, col: str) -> dict:
    row = cabin["seatRows"][row_number - 1]
    return next(s for s in row["seats"] if s.get("code") == f"{row_number}{col}")


def test_synthetic_layout():
    doc = build_synthetic_map("ANY").to_dict()
    psm = doc["seatsItineraryParts"][0]["segmentSeatMaps"][0]["passengerSeatMaps"][0]
    cabin = _cabin(doc)

    assert psm["seatMap"]["aircraft"] == "B737"
    assert psm["seatSelectionEnabledForPax"] is True
    assert cabin["deck"] == "MAIN"
    assert cabin["firstRow"] == 1
    assert cabin["lastRow"] == 30
    assert cabin["seatColumns"] == [LEFT_SIDE, "A", "B", "C", "D", "E", "F", RIGHT_SIDE]
    assert [r["rowNumber"] for r in cabin["seatRows"]] == list(range(1, 31))
    for row in cabin["seatRows"]:
        assert len(row["seats"]) == 8
        assert row["seats"][0]["slotCharacteristics"] == [LEFT_SIDE]
        assert row["seats"][-1]["slotCharacteristics"] == [RIGHT_SIDE]
    assert doc["seatsItineraryParts"][0]["segmentSeatMaps"][0]["segment"] == {
        "@type": "FlightSegment",
        "segmentOfferInformation": {"flightsMiles": 500},
    }
    assert doc["selectedSeats"] == []


def test_synthetic_availability_rules():
    cabin = _cabin(build_synthetic_map("F9").to_dict())

    for col in "ABCDEF":
        assert _seat(cabin, 10, col)["available"] is False
        assert _seat(cabin, 20, col)["available"] is False
        assert _seat(cabin, 11, col)["available"] is True
    assert _seat(cabin, 15, "A")["available"] is False
    assert _seat(cabin, 15, "F")["available"] is False
    assert _seat(cabin, 15, "B")["available"] is True

    premium = _seat(cabin, 4, "C")
    assert premium["designations"] == ["PREMIUM"]
    assert premium["freeOfCharge"] is False
    standard = _seat(cabin, 5, "C")
    assert "designations" not in standard
    assert standard["freeOfCharge"] is True
    assert cabin["seatRows"][0]["seatCodes"] == ["1A", "1B", "1C", "1D", "1E", "1F"]


def test_synthetic_map_is_byte_identical_and_ignores_flight_id():
    first = json.dumps(build_synthetic_map("F1").to_dict())

    assert first == json.dumps(build_synthetic_map("F1").to_dict())
    assert first == json.dumps(build_synthetic_map("ZZ999").to_dict())


def test_placeholder_passenger():
    psm = build_synthetic_map("F1").to_dict()["seatsItineraryParts"][0]["segmentSeatMaps"][0]["passengerSeatMaps"][0]

    assert psm["passenger"] == {
        "passengerIndex": 1,
        "passengerNameNumber": "01.01",
        "passengerDetails": {"firstName": "John", "lastName": "Doe"},
    }


def test_service_uses_synthetic_map_when_core_gateways_are_missing(gateways):
    service = SeatMapService(gateways.without_core())

    doc = service.get_seat_map("does-not-exist", "7").to_dict()
    psm = doc["seatsItineraryParts"][0]["segmentSeatMaps"][0]["passengerSeatMaps"][0]

    assert psm["seatMap"]["aircraft"] == "B737"
    assert psm["passenger"]["passengerNameNumber"] == "02.01"
    assert psm["passenger"]["passengerDetails"]["firstName"] == "Ada"


def test_synthetic_map_with_unknown_passenger_uses_placeholder(gateways):
    service = SeatMapService(gateways.without_core())

    psm = service.get_seat_map("F1", "404").passenger_seat_map

    assert psm.passenger.passenger_details.first_name == "John"


def test_synthetic_map_without_passenger_gateway(gateways):
    bare = SeatMapGateways(seats=gateways.seats)
    service = SeatMapService(bare)

    first = json.dumps(service.get_seat_map("F1", "7").to_dict())
    second = json.dumps(service.get_seat_map("F1", "7").to_dict())

    assert first == second
    assert service.get_seat_map("F1", "7").passenger_seat_map.passenger.passenger_name_number == "01.01"
