"""Seat-map response document.

Field names and nesting are an external contract consumed by storefront
clients; `to_dict()` on each node renders exactly that shape:

  SeatMapResponse
    seatsItineraryParts[] -> segmentSeatMaps[] -> passengerSeatMaps[]
      seatMap -> cabins[] -> seatRows[] -> seats[]
    selectedSeats[]

Optional keys (`code`, `slotCharacteristics`, `designations`, passenger
details) are left out when empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


LEFT_SIDE = "LEFT_SIDE"
RIGHT_SIDE = "RIGHT_SIDE"
BLANK = "BLANK"

JsonObject = dict[str, Any]


@dataclass(slots=True)
class SeatMapItem:
    """One slot of a row: a real seat, an aisle or a blank placeholder."""

    storefront_slot_code: str
    available: bool = False
    entitled: bool = False
    fee_waived: bool = False
    free_of_charge: bool = True
    originally_selected: bool = False
    code: str = ""
    slot_characteristics: list[str] = field(default_factory=list)
    designations: list[str] = field(default_factory=list)

    def to_dict(self) -> JsonObject:
        out: JsonObject = {}
        if self.slot_characteristics:
            out["slotCharacteristics"] = list(self.slot_characteristics)
        out["storefrontSlotCode"] = self.storefront_slot_code
        out["available"] = self.available
        if self.code:
            out["code"] = self.code
        out["entitled"] = self.entitled
        out["feeWaived"] = self.fee_waived
        out["freeOfCharge"] = self.free_of_charge
        out["originallySelected"] = self.originally_selected
        if self.designations:
            out["designations"] = list(self.designations)
        return out


@dataclass(slots=True)
class SeatMapRow:
    row_number: int
    seat_codes: list[str] = field(default_factory=list)
    seats: list[SeatMapItem] = field(default_factory=list)

    def to_dict(self) -> JsonObject:
        return {
            "rowNumber": self.row_number,
            "seatCodes": list(self.seat_codes),
            "seats": [s.to_dict() for s in self.seats],
        }


@dataclass(slots=True)
class CabinMap:
    deck: str
    seat_columns: list[str]
    first_row: int
    last_row: int
    seat_rows: list[SeatMapRow] = field(default_factory=list)

    def to_dict(self) -> JsonObject:
        return {
            "deck": self.deck,
            "seatColumns": list(self.seat_columns),
            "seatRows": [r.to_dict() for r in self.seat_rows],
            "firstRow": self.first_row,
            "lastRow": self.last_row,
        }


@dataclass(slots=True)
class SeatMap:
    aircraft: str
    cabins: list[CabinMap] = field(default_factory=list)
    rows_disabled_causes: list[str] = field(default_factory=list)

    def to_dict(self) -> JsonObject:
        return {
            "rowsDisabledCauses": list(self.rows_disabled_causes),
            "aircraft": self.aircraft,
            "cabins": [c.to_dict() for c in self.cabins],
        }


@dataclass(slots=True)
class PassengerDetails:
    first_name: str = ""
    last_name: str = ""
    gender: str = ""
    email: str = ""
    phone: str = ""

    def to_dict(self) -> JsonObject:
        pairs = (
            ("firstName", self.first_name),
            ("lastName", self.last_name),
            ("gender", self.gender),
            ("email", self.email),
            ("phone", self.phone),
        )
        return {k: v for k, v in pairs if v}


@dataclass(slots=True)
class PassengerInfo:
    passenger_index: int
    passenger_name_number: str
    passenger_details: PassengerDetails = field(default_factory=PassengerDetails)

    def to_dict(self) -> JsonObject:
        return {
            "passengerIndex": self.passenger_index,
            "passengerNameNumber": self.passenger_name_number,
            "passengerDetails": self.passenger_details.to_dict(),
        }


@dataclass(slots=True)
class PassengerSeatMap:
    seat_map: SeatMap
    passenger: PassengerInfo
    seat_selection_enabled_for_pax: bool = True

    def to_dict(self) -> JsonObject:
        return {
            "seatSelectionEnabledForPax": self.seat_selection_enabled_for_pax,
            "seatMap": self.seat_map.to_dict(),
            "passenger": self.passenger.to_dict(),
        }


@dataclass(slots=True)
class SegmentOfferInformation:
    flights_miles: int = 0

    def to_dict(self) -> JsonObject:
        return {"flightsMiles": self.flights_miles}


@dataclass(slots=True)
class Segment:
    type: str = "Segment"
    segment_offer_information: SegmentOfferInformation = field(default_factory=SegmentOfferInformation)

    def to_dict(self) -> JsonObject:
        return {
            "@type": self.type,
            "segmentOfferInformation": self.segment_offer_information.to_dict(),
        }


@dataclass(slots=True)
class SegmentSeatMap:
    segment: Segment
    passenger_seat_maps: list[PassengerSeatMap] = field(default_factory=list)

    def to_dict(self) -> JsonObject:
        return {
            "passengerSeatMaps": [p.to_dict() for p in self.passenger_seat_maps],
            "segment": self.segment.to_dict(),
        }


@dataclass(slots=True)
class ItineraryPart:
    segment_seat_maps: list[SegmentSeatMap] = field(default_factory=list)

    def to_dict(self) -> JsonObject:
        return {"segmentSeatMaps": [s.to_dict() for s in self.segment_seat_maps]}


@dataclass(slots=True)
class SeatMapResponse:
    seats_itinerary_parts: list[ItineraryPart] = field(default_factory=list)
    selected_seats: list[str] = field(default_factory=list)

    def to_dict(self) -> JsonObject:
        return {
            "seatsItineraryParts": [p.to_dict() for p in self.seats_itinerary_parts],
            "selectedSeats": list(self.selected_seats),
        }

    @property
    def passenger_seat_map(self) -> PassengerSeatMap:
        """The single passenger seat map of the single-segment contract."""

        return self.seats_itinerary_parts[0].segment_seat_maps[0].passenger_seat_maps[0]
