"""Entry point for serving the Volunteer Hub API.

Starts the FastAPI application with Uvicorn.  Host, port, log level
and storage backend come from environment variables (see
``volunteer_hub_api.app.core.config``).

Usage:
    python run.py
    STORAGE_BACKEND=memory PORT=9000 python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from volunteer_hub_api.app.core.config import settings
from volunteer_hub_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
