"""In-memory store for seat-map entities.

The store keeps one table per entity. Records are deep-copied on the way in
and on the way out, so nothing handed to a request is shared with the store
or with other requests. Writes go through a single lock: the last update of
a seat wins.

Repository classes at the bottom expose the store through the gateway
contracts in `gateways.py`.
"""

from __future__ import annotations

from copy import deepcopy
from threading import RLock
from typing import TypeVar

from .models import Aircraft, Cabin, Flight, Passenger, Seat, SeatPrice, SeatRow


T = TypeVar("T")


def _clone(record: T | None) -> T | None:
    return deepcopy(record) if record is not None else None


class SeatMapStore:
    """Thread-safe in-memory store."""

    def __init__(self) -> None:
        self._lock = RLock()

        self.flights: dict[str, Flight] = {}
        self.aircraft: dict[str, Aircraft] = {}
        self.cabins: dict[str, Cabin] = {}
        self.rows: dict[str, SeatRow] = {}
        self.seats: dict[str, Seat] = {}
        # Keyed by seat id: one price per seat.
        self.prices: dict[str, SeatPrice] = {}
        self.passengers: dict[str, Passenger] = {}

    def add_flight(self, flight: Flight) -> Flight:
        with self._lock:
            self.flights[flight.id] = _clone(flight)
            return flight

    def add_aircraft(self, aircraft: Aircraft) -> Aircraft:
        with self._lock:
            self.aircraft[aircraft.id] = _clone(aircraft)
            return aircraft

    def add_cabin(self, cabin: Cabin) -> Cabin:
        with self._lock:
            self.cabins[cabin.id] = _clone(cabin)
            return cabin

    def add_row(self, row: SeatRow) -> SeatRow:
        with self._lock:
            self.rows[row.id] = _clone(row)
            return row

    def add_seat(self, seat: Seat, price: SeatPrice | None = None) -> Seat:
        with self._lock:
            self.seats[seat.id] = _clone(seat)
            if price is not None:
                self.prices[seat.id] = _clone(price)
            return seat

    def add_passenger(self, passenger: Passenger) -> Passenger:
        with self._lock:
            self.passengers[passenger.id] = _clone(passenger)
            return passenger

    def replace_seat(self, seat: Seat) -> bool:
        """Store a new version of an existing seat; False when it is unknown."""

        with self._lock:
            if seat.id not in self.seats:
                return False
            self.seats[seat.id] = _clone(seat)
            return True


class _Repository:
    def __init__(self, store: SeatMapStore) -> None:
        self.store = store


class FlightRepository(_Repository):
    def get_by_id(self, flight_id: str) -> Flight | None:
        with self.store._lock:
            return _clone(self.store.flights.get(flight_id))


class AircraftRepository(_Repository):
    def get_by_code(self, code: str) -> Aircraft | None:
        with self.store._lock:
            for aircraft in self.store.aircraft.values():
                if aircraft.code == code:
                    return _clone(aircraft)
            return None


class CabinRepository(_Repository):
    def get_by_segment_id(self, segment_id: str) -> list[Cabin]:
        with self.store._lock:
            cabins = [_clone(c) for c in self.store.cabins.values() if c.segment_id == segment_id]
        return sorted(cabins, key=lambda c: (c.deck, c.first_row))


class RowRepository(_Repository):
    def get_by_cabin_id(self, cabin_id: str) -> list[SeatRow]:
        with self.store._lock:
            rows = [_clone(r) for r in self.store.rows.values() if r.cabin_id == cabin_id]
        return sorted(rows, key=lambda r: r.row_number)


class SeatRepository(_Repository):
    def get_by_id(self, seat_id: str) -> Seat | None:
        with self.store._lock:
            return _clone(self.store.seats.get(seat_id))

    def get_by_flight_id(self, flight_id: str) -> list[Seat]:
        # Seats are stored per segment; a flight is addressed by its segment id.
        with self.store._lock:
            return [_clone(s) for s in self.store.seats.values() if s.segment_id == flight_id]

    def get_by_row_id(self, row_id: str) -> list[Seat]:
        with self.store._lock:
            return [_clone(s) for s in self.store.seats.values() if s.row_id == row_id]

    def get_price_by_seat_id(self, seat_id: str) -> SeatPrice | None:
        with self.store._lock:
            return _clone(self.store.prices.get(seat_id))

    def update(self, seat: Seat) -> None:
        if not self.store.replace_seat(seat):
            raise KeyError(seat.id)


class PassengerRepository(_Repository):
    def get_by_id(self, passenger_id: str) -> Passenger | None:
        with self.store._lock:
            return _clone(self.store.passengers.get(passenger_id))
