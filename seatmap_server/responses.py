"""Response envelope helpers.

Health checks, seat records and every error share one envelope:

    {"error": {...} | null, **payload}

The seat-map document is returned bare; its shape is a fixed external
contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


JsonObject = dict[str, Any]


@dataclass(slots=True)
class Envelope:
    error: JsonObject | None = None

    def to_dict(self, payload: Mapping[str, Any] | None = None) -> JsonObject:
        out: JsonObject = {"error": self.error}
        if payload:
            out.update(payload)
        return out


def ok(payload: Mapping[str, Any] | None = None) -> JsonObject:
    return Envelope().to_dict(payload)


def fail(error: Mapping[str, Any], payload: Mapping[str, Any] | None = None) -> JsonObject:
    """Error envelope; `payload` keys sit beside `error`."""

    return Envelope(error=dict(error)).to_dict(payload)
