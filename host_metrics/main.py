"""CLI entrypoint for serving the host metrics API with Uvicorn."""
from __future__ import annotations

import uvicorn

from .api import create_app
from .config import configure_logging, get_settings


def main() -> None:
    settings = get_settings()
    configure_logging(settings)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
