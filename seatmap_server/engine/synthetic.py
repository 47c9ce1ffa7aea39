"""Synthetic seat map for deployments without flight, aircraft or cabin data.

The map is a fixture, not business logic: one MAIN deck cabin of a B737,
columns A-F, rows 1-30, where

- rows 1-4 are PREMIUM seats (not free of charge),
- rows 10 and 20 are fully occupied,
- seats 15A and 15F are blocked.

The output depends only on the passenger passed in, so repeated calls give
identical documents.
"""

from __future__ import annotations

from ..models import Passenger
from ..seat_map import (
    LEFT_SIDE,
    RIGHT_SIDE,
    CabinMap,
    PassengerDetails,
    PassengerInfo,
    SeatMapItem,
    SeatMapResponse,
    SeatMapRow,
    Segment,
    SegmentOfferInformation,
)
from .assembler import passenger_info, wrap
from .grid import aisle_slot, padded_columns


SYNTHETIC_AIRCRAFT = "B737"
SYNTHETIC_DECK = "MAIN"
SYNTHETIC_COLUMNS = ("A", "B", "C", "D", "E", "F")
SYNTHETIC_FIRST_ROW = 1
SYNTHETIC_LAST_ROW = 30
SYNTHETIC_FLIGHTS_MILES = 500

PREMIUM_ROWS = range(1, 5)
OCCUPIED_ROWS = frozenset({10, 20})
BLOCKED_SEATS = frozenset({"15A", "15F"})


def placeholder_passenger() -> PassengerInfo:
    return PassengerInfo(
        passenger_index=1,
        passenger_name_number="01.01",
        passenger_details=PassengerDetails(first_name="John", last_name="Doe"),
    )


def _slot(row_number: int, col: str) -> SeatMapItem:
    code = f"{row_number}{col}"
    premium = row_number in PREMIUM_ROWS
    available = row_number not in OCCUPIED_ROWS and code not in BLOCKED_SEATS

    return SeatMapItem(
        storefront_slot_code=code,
        code=code,
        available=available,
        entitled=True,
        fee_waived=False,
        free_of_charge=not premium,
        originally_selected=False,
        designations=["PREMIUM"] if premium else [],
    )


def synthetic_rows(first_row: int = SYNTHETIC_FIRST_ROW, last_row: int = SYNTHETIC_LAST_ROW) -> list[SeatMapRow]:
    rows = []
    for row_number in range(first_row, last_row + 1):
        seats = [_slot(row_number, col) for col in SYNTHETIC_COLUMNS]
        rows.append(
            SeatMapRow(
                row_number=row_number,
                seat_codes=[s.code for s in seats],
                seats=[aisle_slot(LEFT_SIDE), *seats, aisle_slot(RIGHT_SIDE)],
            )
        )
    return rows


def build_synthetic_map(flight_id: str, passenger: Passenger | None = None) -> SeatMapResponse:
    """Build the fixture map; `flight_id` does not influence the layout."""

    cabin = CabinMap(
        deck=SYNTHETIC_DECK,
        seat_columns=padded_columns(SYNTHETIC_COLUMNS),
        first_row=SYNTHETIC_FIRST_ROW,
        last_row=SYNTHETIC_LAST_ROW,
        seat_rows=synthetic_rows(),
    )
    segment = Segment(
        type="FlightSegment",
        segment_offer_information=SegmentOfferInformation(flights_miles=SYNTHETIC_FLIGHTS_MILES),
    )
    return wrap(
        aircraft_code=SYNTHETIC_AIRCRAFT,
        cabins=[cabin],
        passenger=passenger_info(passenger, default=placeholder_passenger()),
        segment=segment,
    )
