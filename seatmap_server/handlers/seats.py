"""Seat handlers.

Endpoints
---------
- GET /api/seats/map?flightId=...&passengerId=...
- GET /api/seats/{seatId}
- PUT /api/seats/{seatId}/availability   body: {"available": bool}
- GET /api/flights/{flightId}/seats
- GET /api/rows/{rowId}/seats

The seat map is returned as the bare document; every other response, and
every error, uses the envelope from `responses`. Engine errors carry their
own HTTP status (400, 404 or 500).

Service calls block on their gateways, so they run in the threadpool.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ..engine.service import SeatMapService
from ..errors import SeatMapError, ValidationFailedError
from ..headers import RequestContext, build_request_context
from ..responses import fail, ok


log = logging.getLogger("seatmap_server.handlers.seats")


def _service(request: Request) -> SeatMapService:
    return request.app.state.service  # type: ignore[attr-defined]


def _ctx(request: Request) -> RequestContext:
    return getattr(request.state, "ctx", None) or build_request_context(request.headers)


def _error_response(request: Request, exc: SeatMapError) -> JSONResponse:
    ctx = _ctx(request)
    log.info("request_id=%s %s %s -> %s %s", ctx.request_id, request.method, request.url.path, exc.status_code, exc.code)
    return JSONResponse(fail(exc.as_error()), status_code=exc.status_code)


async def get_seat_map(request: Request) -> JSONResponse:
    flight_id = str(request.query_params.get("flightId") or "").strip()
    passenger_id = str(request.query_params.get("passengerId") or "").strip()

    try:
        if not flight_id:
            raise ValidationFailedError("Flight ID is required", details={"param": "flightId"})
        seat_map = await run_in_threadpool(_service(request).get_seat_map, flight_id, passenger_id)
    except SeatMapError as exc:
        return _error_response(request, exc)

    return JSONResponse(seat_map.to_dict(), status_code=200)


async def get_seat(request: Request) -> JSONResponse:
    seat_id = str(request.path_params.get("seatId") or "").strip()
    try:
        seat = await run_in_threadpool(_service(request).get_seat, seat_id)
    except SeatMapError as exc:
        return _error_response(request, exc)
    return JSONResponse(ok(seat.to_dict()), status_code=200)


def _parse_available(body: Any) -> bool:
    if not isinstance(body, dict) or not isinstance(body.get("available"), bool):
        raise ValidationFailedError(
            "Body must be a JSON object with a boolean 'available' field",
            details={"field": "available"},
        )
    return body["available"]


async def put_seat_availability(request: Request) -> JSONResponse:
    seat_id = str(request.path_params.get("seatId") or "").strip()

    try:
        body = await request.json()
    except ValueError:
        body = None

    try:
        available = _parse_available(body)
        seat = await run_in_threadpool(_service(request).update_availability, seat_id, available)
    except SeatMapError as exc:
        return _error_response(request, exc)
    return JSONResponse(ok(seat.to_dict()), status_code=200)


async def get_flight_seats(request: Request) -> JSONResponse:
    flight_id = str(request.path_params.get("flightId") or "").strip()
    try:
        seats = await run_in_threadpool(_service(request).get_seats_by_flight, flight_id)
    except SeatMapError as exc:
        return _error_response(request, exc)
    return JSONResponse(ok({"seats": [s.to_dict() for s in seats]}), status_code=200)


async def get_row_seats(request: Request) -> JSONResponse:
    row_id = str(request.path_params.get("rowId") or "").strip()
    try:
        seats = await run_in_threadpool(_service(request).get_seats_by_row, row_id)
    except SeatMapError as exc:
        return _error_response(request, exc)
    return JSONResponse(ok({"seats": [s.to_dict() for s in seats]}), status_code=200)
