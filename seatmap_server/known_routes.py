"""Registry of API routes.

Routes are matched in declaration order, so the literal /api/seats/map path
must stay ahead of /api/seats/{seatId}.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI

from .handlers.seats import get_flight_seats, get_row_seats, get_seat, get_seat_map, put_seat_availability


log = logging.getLogger("seatmap_server.known_routes")

# Each item: {'path': str, 'methods': [str], 'handler': callable}
KNOWN_ROUTES: list[dict[str, Any]] = [
    {"path": "/api/seats/map", "methods": ["GET"], "handler": get_seat_map},
    {"path": "/api/seats/{seatId}", "methods": ["GET"], "handler": get_seat},
    {"path": "/api/seats/{seatId}/availability", "methods": ["PUT"], "handler": put_seat_availability},
    {"path": "/api/flights/{flightId}/seats", "methods": ["GET"], "handler": get_flight_seats},
    {"path": "/api/rows/{rowId}/seats", "methods": ["GET"], "handler": get_row_seats},
]


def register_known_routes(app: FastAPI) -> None:
    for item in KNOWN_ROUTES:
        app.add_route(item["path"], item["handler"], methods=item["methods"])
        log.debug("registered %s %s", ",".join(item["methods"]), item["path"])
