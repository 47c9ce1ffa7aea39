"""Error catalog and exceptions crossing the engine boundary.

Only not-found and internal failures leave the engine as errors; degraded
lookups (rows, prices, passenger) are absorbed where they happen and a
missing mandatory gateway selects the synthetic seat map instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ErrorCode:
    """Represents a stable error code used in the error envelope."""

    code: str
    default_message: str
    status_code: int = 500

    def as_error(self, *, message: str | None = None, details: Any | None = None) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": message if message is not None else self.default_message,
            "details": details,
        }


VALIDATION_FAILED = ErrorCode(
    code="VALIDATION_FAILED",
    default_message="Request validation failed.",
    status_code=400,
)

FLIGHT_NOT_FOUND = ErrorCode(
    code="FLIGHT_NOT_FOUND",
    default_message="flight not found",
    status_code=404,
)

AIRCRAFT_NOT_FOUND = ErrorCode(
    code="AIRCRAFT_NOT_FOUND",
    default_message="aircraft not found for flight",
    status_code=404,
)

SEAT_NOT_FOUND = ErrorCode(
    code="SEAT_NOT_FOUND",
    default_message="seat not found",
    status_code=404,
)

INTERNAL_ERROR = ErrorCode(
    code="INTERNAL_ERROR",
    default_message="Failed to get seat map",
    status_code=500,
)


class SeatMapError(Exception):
    """Base class for errors surfaced to callers of the engine."""

    error_code: ErrorCode = INTERNAL_ERROR

    def __init__(self, message: str | None = None, *, details: Any | None = None, error_code: ErrorCode | None = None) -> None:
        if error_code is not None:
            self.error_code = error_code
        self.message = message if message is not None else self.error_code.default_message
        self.details = details
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.error_code.code

    @property
    def status_code(self) -> int:
        return self.error_code.status_code

    def as_error(self) -> dict[str, Any]:
        return self.error_code.as_error(message=self.message, details=self.details)


class NotFoundError(SeatMapError):
    error_code = FLIGHT_NOT_FOUND


class InternalError(SeatMapError):
    error_code = INTERNAL_ERROR


class ValidationFailedError(SeatMapError):
    error_code = VALIDATION_FAILED


def error_from_exception(exc: Exception, *, debug: bool = False) -> dict[str, Any]:
    """Convert any exception into the stable error shape.

    Unexpected exceptions only expose their type and message in debug mode.
    """

    if isinstance(exc, SeatMapError):
        return exc.as_error()

    details = {"type": type(exc).__name__, "message": str(exc)} if debug else None
    return INTERNAL_ERROR.as_error(message="Unexpected error in seat map server.", details=details)
