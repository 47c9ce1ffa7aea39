"""Runtime settings.

All settings come from environment variables so the service can be started
with `python -m seatmap_server` and configured by the deployment:

  SEATMAP_HOST, SEATMAP_PORT, SEATMAP_LOG_LEVEL
  SEATMAP_DEBUG=1        include exception details in error envelopes
  SEATMAP_SEED_DEMO=0    start with an empty store
  SEATMAP_SYNTHETIC=1    leave flight/aircraft/cabin gateways unwired
  SEATMAP_CORS_ORIGINS   comma-separated list, "*" by default
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping


def _truthy(value: str | None) -> bool:
    v = (value or "").strip().lower()
    return v in {"1", "true", "yes", "y", "on"}


def _flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    return _truthy(raw)


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"
    debug: bool = False
    seed_demo: bool = True
    synthetic: bool = False
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        origins = [o.strip() for o in (env.get("SEATMAP_CORS_ORIGINS") or "*").split(",") if o.strip()]

        return cls(
            host=env.get("SEATMAP_HOST", "0.0.0.0"),
            port=int(env.get("SEATMAP_PORT", "8080")),
            log_level=env.get("SEATMAP_LOG_LEVEL", "info").lower(),
            debug=_flag(env, "SEATMAP_DEBUG", False),
            seed_demo=_flag(env, "SEATMAP_SEED_DEMO", True),
            synthetic=_flag(env, "SEATMAP_SYNTHETIC", False),
            cors_origins=origins or ["*"],
        )
