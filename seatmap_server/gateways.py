"""Collaborator contracts used by the seat-map engine.

Lookups return None for "not found" and raise for failures. The engine
receives its collaborators through `SeatMapGateways`, built once at startup:
a collaborator that was never wired is simply None.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol

from .models import Aircraft, Cabin, Flight, Passenger, Seat, SeatPrice, SeatRow
from .state import (
    AircraftRepository,
    CabinRepository,
    FlightRepository,
    PassengerRepository,
    RowRepository,
    SeatMapStore,
    SeatRepository,
)


class FlightGateway(Protocol):
    def get_by_id(self, flight_id: str) -> Flight | None: ...


class AircraftGateway(Protocol):
    def get_by_code(self, code: str) -> Aircraft | None: ...


class CabinGateway(Protocol):
    def get_by_segment_id(self, segment_id: str) -> list[Cabin]: ...


class RowGateway(Protocol):
    def get_by_cabin_id(self, cabin_id: str) -> list[SeatRow]: ...


class SeatGateway(Protocol):
    def get_by_id(self, seat_id: str) -> Seat | None: ...

    def get_by_flight_id(self, flight_id: str) -> list[Seat]: ...

    def get_by_row_id(self, row_id: str) -> list[Seat]: ...

    def get_price_by_seat_id(self, seat_id: str) -> SeatPrice | None: ...

    def update(self, seat: Seat) -> None: ...


class PassengerGateway(Protocol):
    def get_by_id(self, passenger_id: str) -> Passenger | None: ...


@dataclass(frozen=True, slots=True)
class SeatMapGateways:
    """Wired collaborators.

    `seats` is mandatory. Flight, aircraft and cabin gateways are required for
    real seat maps; without any of them the engine serves the synthetic map.
    Rows and passengers are optional and only degrade the output.
    """

    seats: SeatGateway
    flights: FlightGateway | None = None
    aircraft: AircraftGateway | None = None
    cabins: CabinGateway | None = None
    rows: RowGateway | None = None
    passengers: PassengerGateway | None = None

    def missing_core(self) -> list[str]:
        missing = []
        if self.flights is None:
            missing.append("flights")
        if self.aircraft is None:
            missing.append("aircraft")
        if self.cabins is None:
            missing.append("cabins")
        return missing

    def has_core(self) -> bool:
        return not self.missing_core()

    def without_core(self) -> "SeatMapGateways":
        return replace(self, flights=None, aircraft=None, cabins=None)

    @classmethod
    def from_store(cls, store: SeatMapStore) -> "SeatMapGateways":
        return cls(
            seats=SeatRepository(store),
            flights=FlightRepository(store),
            aircraft=AircraftRepository(store),
            cabins=CabinRepository(store),
            rows=RowRepository(store),
            passengers=PassengerRepository(store),
        )
