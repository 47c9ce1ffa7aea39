"""Small helpers for deterministic IDs and timestamps.

Demo fixtures need ids that stay the same from one start to the next, so
tests and clients can address seats directly.
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone


def now_utc() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def stable_id(prefix: str, seed: str, *, length: int = 12) -> str:
    """Deterministic ID generator based on a seed string.

    Notes:
      - Uses SHA-1 for compactness and determinism (not for security).
      - Output format: <prefix>-<hex[:length]>
    """

    digest = hashlib.sha1(seed.encode("utf-8")).hexdigest()
    return f"{prefix}-{digest[:length]}"


def stable_bool(seed: str, *, numerator: int, denominator: int) -> bool:
    # Deterministic pseudo-random bool: based on sha1 prefix.
    sid = stable_id("h", seed, length=8)
    n = int(sid.split("-", 1)[1], 16)
    return (n % denominator) < numerator
