"""Entity records read by the seat-map engine.

The engine only reads these records and holds transient copies for one
request. The single mutation is a seat availability toggle.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Iterable

from .versioning import now_utc


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def parse_columns(value: str | Iterable[str] | None) -> list[str]:
    """Normalize stored seat columns ("A,B,C" or a sequence) to an ordered list."""

    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = list(value)
    return [str(p).strip() for p in parts if str(p).strip()]


@dataclass(slots=True)
class Flight:
    id: str
    equipment: str
    itinerary_id: str = ""
    segment_id: str = ""
    flight_number: str = ""
    airline_code: str = ""
    operating_airline: str = ""
    origin: str = ""
    destination: str = ""
    departure: datetime | None = None
    arrival: datetime | None = None
    departure_terminal: str = ""
    arrival_terminal: str = ""
    cabin_class: str = ""
    duration: int = 0
    booking_class: str = ""

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["departure"] = _iso(self.departure)
        out["arrival"] = _iso(self.arrival)
        return out


@dataclass(slots=True)
class Aircraft:
    id: str
    code: str
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Cabin:
    """Seating section of one aircraft on one flight segment.

    `first_row`..`last_row` is inclusive; `seat_columns` is the declared
    column order used to lay out every row.
    """

    id: str
    aircraft_id: str
    segment_id: str
    deck: str
    first_row: int
    last_row: int
    seat_columns: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.seat_columns = parse_columns(self.seat_columns)

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["seat_columns"] = ",".join(self.seat_columns)
        return out


@dataclass(slots=True)
class SeatRow:
    id: str
    cabin_id: str
    row_number: int
    seat_codes: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Seat:
    id: str
    code: str
    row_id: str | None = None
    segment_id: str = ""
    storefront_slot_code: str = "SEAT"
    available: bool = True
    entitled: bool = True
    fee_waived: bool = False
    free_of_charge: bool = False
    originally_selected: bool = False
    entitled_rule_id: str = ""
    fee_waived_rule_id: str = ""
    refund_indicator: str = ""
    seat_characteristics: str = ""
    raw_characteristics: str = ""
    created_at: datetime = field(default_factory=now_utc)
    updated_at: datetime = field(default_factory=now_utc)

    def characteristics(self) -> list[str]:
        """Stored comma-joined characteristics as a list; "" gives []."""

        if not self.seat_characteristics:
            return []
        return self.seat_characteristics.split(",")

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["created_at"] = _iso(self.created_at)
        out["updated_at"] = _iso(self.updated_at)
        return out


@dataclass(slots=True)
class SeatPrice:
    id: str
    seat_id: str
    amount: float
    currency: str = "USD"
    type: str = "SEAT"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class SeatWithPrice:
    seat: Seat
    price: SeatPrice | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "seat": self.seat.to_dict(),
            "price": self.price.to_dict() if self.price is not None else None,
        }


@dataclass(slots=True)
class Passenger:
    id: str
    passenger_index: int
    passenger_name_number: str
    first_name: str
    last_name: str
    segment_id: str = ""
    gender: str | None = None
    email: str | None = None
    phone: str | None = None
    date_of_birth: datetime | None = None
    type: str | None = None
    nationality: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["date_of_birth"] = _iso(self.date_of_birth)
        return out
