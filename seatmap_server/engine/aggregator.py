"""Seat aggregation: pair every seat of a flight (or row) with its price.

Listing the seats is mandatory and its failure propagates. Prices are
best-effort: a seat without a price record is kept with `price=None`; a price
lookup that raises is logged and, by default, the seat is left out of the
result. Seat-map assembly passes `keep_unpriced=True` because the rendered
slot does not depend on the price.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..gateways import SeatGateway
from ..models import Seat, SeatWithPrice


log = logging.getLogger("seatmap_server.engine.aggregator")


def _attach_prices(
    gateway: SeatGateway,
    seats: Iterable[Seat],
    *,
    keep_unpriced: bool,
) -> list[SeatWithPrice]:
    result: list[SeatWithPrice] = []
    for seat in seats:
        try:
            price = gateway.get_price_by_seat_id(seat.id)
        except Exception as exc:  # noqa: BLE001
            log.warning("Failed to get seat price for seat_id=%s: %s", seat.id, exc)
            if keep_unpriced:
                result.append(SeatWithPrice(seat=seat, price=None))
            continue
        result.append(SeatWithPrice(seat=seat, price=price))
    return result


def fetch_seats_with_prices(
    gateway: SeatGateway,
    flight_id: str,
    *,
    keep_unpriced: bool = False,
) -> list[SeatWithPrice]:
    seats = gateway.get_by_flight_id(flight_id)
    return _attach_prices(gateway, seats, keep_unpriced=keep_unpriced)


def fetch_seats_by_row(
    gateway: SeatGateway,
    row_id: str,
    *,
    keep_unpriced: bool = False,
) -> list[SeatWithPrice]:
    seats = gateway.get_by_row_id(row_id)
    return _attach_prices(gateway, seats, keep_unpriced=keep_unpriced)


def fetch_seat(gateway: SeatGateway, seat_id: str) -> SeatWithPrice | None:
    """Single seat with its price; here a failing price lookup propagates."""

    seat = gateway.get_by_id(seat_id)
    if seat is None:
        return None
    return SeatWithPrice(seat=seat, price=gateway.get_price_by_seat_id(seat_id))
