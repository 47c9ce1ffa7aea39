"""Seat-map service: the entry point used by the HTTP handlers.

Per request:

  START -> core gateways wired? -> real path | synthetic path -> DONE

Real path: flight -> aircraft (by the flight's equipment code) -> cabins ->
seats with prices -> passenger -> for each cabin, group seats by row and
build its grid -> assemble.

A missing flight or aircraft record is a NotFoundError and a failing flight,
aircraft, cabin or seat-listing call is an InternalError. Row, price and
passenger lookups only degrade the output.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..errors import AIRCRAFT_NOT_FOUND, FLIGHT_NOT_FOUND, SEAT_NOT_FOUND, InternalError, NotFoundError
from ..gateways import SeatMapGateways
from ..models import Cabin, Passenger, SeatRow, SeatWithPrice
from ..seat_map import CabinMap, SeatMapResponse
from ..versioning import now_utc
from .aggregator import fetch_seat, fetch_seats_by_row, fetch_seats_with_prices
from .assembler import assemble
from .grid import build_cabin_grid
from .grouping import group_by_row
from .synthetic import build_synthetic_map


log = logging.getLogger("seatmap_server.engine.service")


class SeatMapService:
    def __init__(self, gateways: SeatMapGateways) -> None:
        self.gateways = gateways

    # Seat records

    def get_seat(self, seat_id: str) -> SeatWithPrice:
        try:
            seat = fetch_seat(self.gateways.seats, seat_id)
        except Exception as exc:
            log.error("Failed to get seat seat_id=%s", seat_id, exc_info=True)
            raise InternalError("Failed to get seat", details={"seatId": seat_id}) from exc
        if seat is None:
            raise NotFoundError(error_code=SEAT_NOT_FOUND, details={"seatId": seat_id})
        return seat

    def get_seats_by_flight(self, flight_id: str) -> list[SeatWithPrice]:
        try:
            return fetch_seats_with_prices(self.gateways.seats, flight_id)
        except Exception as exc:
            log.error("Failed to get seats by flight_id=%s", flight_id, exc_info=True)
            raise InternalError("Failed to get seats", details={"flightId": flight_id}) from exc

    def get_seats_by_row(self, row_id: str) -> list[SeatWithPrice]:
        try:
            return fetch_seats_by_row(self.gateways.seats, row_id)
        except Exception as exc:
            log.error("Failed to get seats by row_id=%s", row_id, exc_info=True)
            raise InternalError("Failed to get seats", details={"rowId": row_id}) from exc

    def update_availability(self, seat_id: str, available: bool) -> SeatWithPrice:
        """Toggle a seat's availability; concurrent updates are last-write-wins."""

        gateway = self.gateways.seats
        try:
            seat = gateway.get_by_id(seat_id)
        except Exception as exc:
            log.error("Failed to get seat seat_id=%s", seat_id, exc_info=True)
            raise InternalError("Failed to get seat", details={"seatId": seat_id}) from exc
        if seat is None:
            raise NotFoundError(error_code=SEAT_NOT_FOUND, details={"seatId": seat_id})

        seat.available = available
        seat.updated_at = now_utc()
        try:
            gateway.update(seat)
        except Exception as exc:
            log.error("Failed to update seat seat_id=%s", seat_id, exc_info=True)
            raise InternalError("Failed to update seat", details={"seatId": seat_id}) from exc

        log.info("Seat availability updated seat_id=%s available=%s", seat_id, available)
        return self.get_seat(seat_id)

    # Seat map

    def get_seat_map(self, flight_id: str, passenger_id: str = "") -> SeatMapResponse:
        if not self.gateways.has_core():
            log.warning(
                "Using synthetic seat map for flight_id=%s; gateways not configured: %s",
                flight_id,
                ", ".join(self.gateways.missing_core()),
            )
            return build_synthetic_map(flight_id, self._passenger(passenger_id))

        flight = self._call("flight", self.gateways.flights.get_by_id, flight_id, flight_id=flight_id)
        if flight is None:
            raise NotFoundError(error_code=FLIGHT_NOT_FOUND, details={"flightId": flight_id})

        aircraft = self._call("aircraft", self.gateways.aircraft.get_by_code, flight.equipment, flight_id=flight_id)
        if aircraft is None:
            raise NotFoundError(
                error_code=AIRCRAFT_NOT_FOUND,
                details={"flightId": flight_id, "equipment": flight.equipment},
            )

        cabins = self._call("cabins", self.gateways.cabins.get_by_segment_id, flight_id, flight_id=flight_id)
        if self.gateways.rows is None:
            log.warning("Row gateway not configured; every seat of flight_id=%s is a candidate for each cabin", flight_id)

        seats = self._call(
            "seats",
            lambda fid: fetch_seats_with_prices(self.gateways.seats, fid, keep_unpriced=True),
            flight_id,
            flight_id=flight_id,
        )
        passenger = self._passenger(passenger_id)

        cabin_maps = [self._cabin_map(cabin, seats) for cabin in cabins]
        return assemble(flight, aircraft, cabin_maps, passenger)

    def _cabin_map(self, cabin: Cabin, seats: list[SeatWithPrice]) -> CabinMap:
        rows = self._rows(cabin)
        return build_cabin_grid(cabin, group_by_row(cabin, rows, seats))

    def _rows(self, cabin: Cabin) -> list[SeatRow]:
        if self.gateways.rows is None:
            return []
        try:
            return list(self.gateways.rows.get_by_cabin_id(cabin.id))
        except Exception as exc:  # noqa: BLE001
            log.warning("Failed to get rows for cabin_id=%s, continuing without rows: %s", cabin.id, exc)
            return []

    def _passenger(self, passenger_id: str) -> Passenger | None:
        if not passenger_id or self.gateways.passengers is None:
            return None
        try:
            passenger = self.gateways.passengers.get_by_id(passenger_id)
        except Exception as exc:  # noqa: BLE001
            log.warning("Failed to get passenger passenger_id=%s, using default: %s", passenger_id, exc)
            return None
        if passenger is None:
            log.warning("Passenger passenger_id=%s not found, using default", passenger_id)
        return passenger

    @staticmethod
    def _call(what: str, fn: Callable[[str], Any], arg: str, *, flight_id: str) -> Any:
        try:
            return fn(arg)
        except Exception as exc:
            log.error("Failed to get %s for flight_id=%s", what, flight_id, exc_info=True)
            raise InternalError(details={"flightId": flight_id, "lookup": what}) from exc
