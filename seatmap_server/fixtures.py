"""Demo data for a store without a database behind it.

Seeds one Boeing 737-800 flight with two cabins on the MAIN deck:

- BUSINESS rows 1-4, columns A C D F
- ECONOMY rows 5-30, columns A-F, exit rows 12 and 14, no row 13

Seat ids are stable ("seat-<hash>") so clients can address them across
restarts. Availability is a fixed pseudo-random pattern per seat code.
"""

from __future__ import annotations

from .models import Aircraft, Cabin, Flight, Passenger, Seat, SeatPrice, SeatRow
from .state import SeatMapStore
from .versioning import stable_bool, stable_id


DEMO_FLIGHT_ID = "FL100"
DEMO_PASSENGER_ID = "1"

_CABINS = (
    # cabin_type, first_row, last_row, columns, base price
    ("BUSINESS", 1, 4, ("A", "C", "D", "F"), 0.0),
    ("ECONOMY", 5, 30, ("A", "B", "C", "D", "E", "F"), 15.0),
)
_EXIT_ROWS = {12, 14}
_SKIPPED_ROWS = {13}
_WINDOW = {"A", "F"}
_AISLE = {"C", "D"}


def _characteristics(row_number: int, col: str) -> str:
    tags = []
    if col in _WINDOW:
        tags.append("WINDOW")
    if col in _AISLE:
        tags.append("AISLE")
    if row_number in _EXIT_ROWS:
        tags.append("EXIT_ROW")
    return ",".join(tags)


def _seat_price(seat_id: str, cabin_type: str, row_number: int, base: float) -> SeatPrice:
    amount = base
    if row_number in _EXIT_ROWS:
        amount = 30.0
    return SeatPrice(
        id=stable_id("price", seat_id),
        seat_id=seat_id,
        amount=amount,
        currency="USD",
        type=cabin_type,
    )


def seed_demo_data(store: SeatMapStore, *, flight_id: str = DEMO_FLIGHT_ID) -> None:
    aircraft = store.add_aircraft(Aircraft(id="ac-b738", code="B738", name="Boeing 737-800"))
    store.add_flight(
        Flight(
            id=flight_id,
            equipment=aircraft.code,
            itinerary_id=f"itin-{flight_id}",
            segment_id=flight_id,
            flight_number="100",
            airline_code="MO",
            operating_airline="MO",
            origin="AMS",
            destination="LHR",
            cabin_class="ECONOMY",
            duration=75,
            booking_class="Y",
        )
    )

    for cabin_type, first_row, last_row, columns, base in _CABINS:
        cabin = store.add_cabin(
            Cabin(
                id=stable_id("cabin", f"{flight_id}|{cabin_type}"),
                aircraft_id=aircraft.id,
                segment_id=flight_id,
                deck="MAIN",
                first_row=first_row,
                last_row=last_row,
                seat_columns=list(columns),
            )
        )
        for row_number in range(first_row, last_row + 1):
            if row_number in _SKIPPED_ROWS:
                continue
            row = store.add_row(
                SeatRow(
                    id=stable_id("row", f"{cabin.id}|{row_number}"),
                    cabin_id=cabin.id,
                    row_number=row_number,
                    seat_codes=",".join(f"{row_number}{c}" for c in columns),
                )
            )
            for col in columns:
                code = f"{row_number}{col}"
                seat_id = stable_id("seat", f"{flight_id}|{code}")
                occupied = stable_bool(f"{flight_id}|{code}", numerator=2, denominator=11)
                price = _seat_price(seat_id, cabin_type, row_number, base)
                store.add_seat(
                    Seat(
                        id=seat_id,
                        code=code,
                        row_id=row.id,
                        segment_id=flight_id,
                        storefront_slot_code="SEAT",
                        available=not occupied,
                        entitled=True,
                        free_of_charge=price.amount == 0.0,
                        seat_characteristics=_characteristics(row_number, col),
                    ),
                    price=price,
                )

    store.add_passenger(
        Passenger(
            id=DEMO_PASSENGER_ID,
            passenger_index=1,
            passenger_name_number="01.01",
            first_name="Jane",
            last_name="Smith",
            segment_id=flight_id,
            email="jane.smith@example.com",
        )
    )
