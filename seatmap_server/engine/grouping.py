"""Row grouping: decide which seats belong to a cabin and bucket them by row.

Seat codes are "<rowNumber><column>" ("14A"). The row number is read from
the leading digits of the code; a code without leading digits maps to row 0,
which is never inside a cabin's row range, so such a seat is dropped from the
grid instead of failing the request.
"""

from __future__ import annotations

import re
from typing import Iterable

from ..models import Cabin, SeatRow, SeatWithPrice


MALFORMED_ROW = 0

_ROW_PREFIX = re.compile(r"\s*(\d+)")


def parse_row_number(code: str | None) -> int:
    if not code:
        return MALFORMED_ROW
    match = _ROW_PREFIX.match(code)
    if match is None:
        return MALFORMED_ROW
    return int(match.group(1))


def group_by_row(
    cabin: Cabin,
    rows: Iterable[SeatRow] | None,
    seats: Iterable[SeatWithPrice],
) -> dict[int, list[SeatWithPrice]]:
    """Map row number -> seats of that row for one cabin.

    `rows` are the row records looked up for `cabin`. With row records, a seat belongs to the cabin when its `row_id` is one of
    the cabin's row ids. Without any row record every seat of the flight is a
    candidate for the cabin. Rows without seats are absent from the result.
    """

    row_ids = {r.id for r in rows or ()}
    fallback = not row_ids

    grouped: dict[int, list[SeatWithPrice]] = {}
    for item in seats:
        if not fallback and item.seat.row_id not in row_ids:
            continue
        grouped.setdefault(parse_row_number(item.seat.code), []).append(item)
    return grouped
