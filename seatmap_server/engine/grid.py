"""Cabin grid: lay out every row of a cabin as a fixed sequence of slots.

Layout of each row, for declared columns A..F:

  LEFT_SIDE | A | B | C | D | E | F | RIGHT_SIDE

Every row number from `first_row` to `last_row` is rendered exactly once,
in ascending order, whether or not seat inventory exists for it. Columns
without a seat get a BLANK placeholder.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ..models import Cabin, SeatWithPrice
from ..seat_map import BLANK, LEFT_SIDE, RIGHT_SIDE, CabinMap, SeatMapItem, SeatMapRow


log = logging.getLogger("seatmap_server.engine.grid")


def padded_columns(columns: Sequence[str]) -> list[str]:
    return [LEFT_SIDE, *columns, RIGHT_SIDE]


def aisle_slot(side: str) -> SeatMapItem:
    return SeatMapItem(storefront_slot_code=BLANK, free_of_charge=True, slot_characteristics=[side])


def blank_slot() -> SeatMapItem:
    return SeatMapItem(storefront_slot_code=BLANK, free_of_charge=True)


def seat_slot(item: SeatWithPrice) -> SeatMapItem:
    seat = item.seat
    return SeatMapItem(
        storefront_slot_code=seat.storefront_slot_code,
        available=seat.available,
        code=seat.code,
        entitled=seat.entitled,
        fee_waived=seat.fee_waived,
        free_of_charge=seat.free_of_charge,
        originally_selected=seat.originally_selected,
        slot_characteristics=seat.characteristics(),
    )


def _find_seat(seats: Sequence[SeatWithPrice], code: str) -> SeatWithPrice | None:
    for item in seats:
        if item.seat.code == code:
            return item
    return None


def build_row(row_number: int, columns: Sequence[str], seats: Sequence[SeatWithPrice]) -> SeatMapRow:
    row = SeatMapRow(row_number=row_number)
    row.seats.append(aisle_slot(LEFT_SIDE))

    for col in columns:
        found = _find_seat(seats, f"{row_number}{col}")
        if found is None:
            row.seats.append(blank_slot())
            continue
        row.seat_codes.append(found.seat.code)
        row.seats.append(seat_slot(found))

    row.seats.append(aisle_slot(RIGHT_SIDE))
    return row


def build_cabin_grid(cabin: Cabin, seats_by_row: Mapping[int, Sequence[SeatWithPrice]]) -> CabinMap:
    columns = list(cabin.seat_columns)
    cabin_map = CabinMap(
        deck=cabin.deck,
        seat_columns=padded_columns(columns),
        first_row=cabin.first_row,
        last_row=cabin.last_row,
    )

    if cabin.first_row > cabin.last_row:
        log.warning(
            "Cabin %s has an empty row range (first_row=%s, last_row=%s); rendering no rows",
            cabin.id,
            cabin.first_row,
            cabin.last_row,
        )
        return cabin_map

    for row_number in range(cabin.first_row, cabin.last_row + 1):
        cabin_map.seat_rows.append(build_row(row_number, columns, seats_by_row.get(row_number, ())))
    return cabin_map
