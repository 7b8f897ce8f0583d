"""Entry point for serving the FurryMatch API.

Host and port come from ``API_HOST`` / ``API_PORT`` (see
``furrymatch_api.app.core.config``); other settings such as
``DATABASE_URL`` and ``SECRET_KEY`` are read from the environment in
the same way.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from furrymatch_api.app.core.config import settings
from furrymatch_api.app.main import app


def main() -> None:
    """Serve the API with uvicorn until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    try:
        server.run()
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutting down")


if __name__ == "__main__":
    main()
