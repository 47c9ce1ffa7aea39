"""Module entrypoint: `python -m seatmap_server` starts uvicorn."""

from __future__ import annotations

import uvicorn

from .config import Settings
from .logging_config import configure_logging
from .server import create_app


def main() -> None:
    settings = Settings.from_env()
    log = configure_logging(settings.log_level)
    log.info("Starting seat map server on %s:%s", settings.host, settings.port)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        # The service usually runs behind a reverse proxy.
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()
