"""Request context derived from headers.

Every request carries a correlation id used in log lines and echoed back in
the response. Callers may provide it; otherwise one is generated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping
from uuid import uuid4


REQUEST_ID = "X-Request-Id"


def _lower_map(headers: Mapping[str, str]) -> dict[str, str]:
    return {str(k).lower(): str(v) for k, v in headers.items()}


@dataclass(slots=True)
class RequestContext:
    request_id: str


def build_request_context(headers: Mapping[str, str]) -> RequestContext:
    """Build a RequestContext from incoming headers. Always succeeds."""

    h = _lower_map(headers)
    request_id = h.get(REQUEST_ID.lower(), "").strip()
    if request_id:
        return RequestContext(request_id=request_id)
    return RequestContext(request_id=f"req-{uuid4().hex}")
