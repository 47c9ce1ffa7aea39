"""Wrap cabin grids and passenger details into the seat-map document.

The contract is single segment, single passenger: one itinerary part, one
segment seat map and one passenger seat map, with seat selection enabled.
No persisted selection is read, so `selectedSeats` is always empty.
"""

from __future__ import annotations

from typing import Sequence

from ..models import Aircraft, Flight, Passenger
from ..seat_map import (
    CabinMap,
    ItineraryPart,
    PassengerDetails,
    PassengerInfo,
    PassengerSeatMap,
    SeatMap,
    SeatMapResponse,
    Segment,
    SegmentOfferInformation,
    SegmentSeatMap,
)


def default_passenger_info() -> PassengerInfo:
    return PassengerInfo(passenger_index=1, passenger_name_number="01.01")


def passenger_info(passenger: Passenger | None, *, default: PassengerInfo | None = None) -> PassengerInfo:
    if passenger is None:
        return default if default is not None else default_passenger_info()

    return PassengerInfo(
        passenger_index=passenger.passenger_index,
        passenger_name_number=passenger.passenger_name_number,
        passenger_details=PassengerDetails(
            first_name=passenger.first_name,
            last_name=passenger.last_name,
            gender=passenger.gender or "",
            email=passenger.email or "",
            phone=passenger.phone or "",
        ),
    )


def wrap(
    *,
    aircraft_code: str,
    cabins: Sequence[CabinMap],
    passenger: PassengerInfo,
    segment: Segment,
) -> SeatMapResponse:
    passenger_seat_map = PassengerSeatMap(
        seat_selection_enabled_for_pax=True,
        seat_map=SeatMap(aircraft=aircraft_code, cabins=list(cabins)),
        passenger=passenger,
    )
    segment_seat_map = SegmentSeatMap(segment=segment, passenger_seat_maps=[passenger_seat_map])
    return SeatMapResponse(
        seats_itinerary_parts=[ItineraryPart(segment_seat_maps=[segment_seat_map])],
        selected_seats=[],
    )


def assemble(
    flight: Flight,
    aircraft: Aircraft,
    cabin_maps: Sequence[CabinMap],
    passenger: Passenger | None,
) -> SeatMapResponse:
    # Distance is not stored for flights yet, so no miles are offered.
    segment = Segment(type="Segment", segment_offer_information=SegmentOfferInformation(flights_miles=0))
    return wrap(
        aircraft_code=aircraft.code,
        cabins=cabin_maps,
        passenger=passenger_info(passenger),
        segment=segment,
    )
