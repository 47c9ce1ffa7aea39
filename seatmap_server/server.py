"""HTTP application.

`create_app()` wires settings, gateways and the seat-map service:

- Without explicit gateways, an in-memory store is created (seeded with the
  demo flight unless SEATMAP_SEED_DEMO=0).
- With SEATMAP_SYNTHETIC=1 the flight, aircraft and cabin gateways are left
  unwired and every seat map is the synthetic one.
- Unexpected exceptions never escape as framework errors: the guard
  middleware logs them and answers with a 500 error envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings
from .engine.service import SeatMapService
from .errors import error_from_exception
from .fixtures import seed_demo_data
from .gateways import SeatMapGateways
from .headers import REQUEST_ID, build_request_context
from .known_routes import register_known_routes
from .responses import fail, ok
from .state import SeatMapStore


log = logging.getLogger("seatmap_server.server")


def build_gateways(settings: Settings) -> SeatMapGateways:
    store = SeatMapStore()
    if settings.seed_demo:
        seed_demo_data(store)
    gateways = SeatMapGateways.from_store(store)
    if settings.synthetic:
        gateways = gateways.without_core()
    return gateways


def create_app(settings: Settings | None = None, gateways: SeatMapGateways | None = None) -> FastAPI:
    settings = settings if settings is not None else Settings.from_env()
    if gateways is None:
        gateways = build_gateways(settings)

    app = FastAPI(
        title="Seat Map Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings  # type: ignore[attr-defined]
    app.state.service = SeatMapService(gateways)  # type: ignore[attr-defined]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization", REQUEST_ID],
        expose_headers=[REQUEST_ID],
    )

    @app.middleware("http")
    async def _exception_guard(request: Request, call_next):
        """Attach the request context and turn unexpected exceptions into 500s."""

        context = build_request_context(request.headers)
        request.state.ctx = context
        try:
            response: Response = await call_next(request)
        except Exception as exc:  # noqa: BLE001
            log.exception("request_id=%s unhandled error on %s %s", context.request_id, request.method, request.url.path)
            payload = fail(error_from_exception(exc, debug=settings.debug))
            response = JSONResponse(payload, status_code=500)
        response.headers[REQUEST_ID] = context.request_id
        return response

    @app.get("/healthz")
    async def healthz():
        return ok({"status": "ok"})

    @app.get("/api/health")
    async def api_health():
        return ok({"status": "ok"})

    register_known_routes(app)

    return app
