"""Entry point for the Project Tracker API.

Serves the FastAPI application with Uvicorn.  Host, port and log level
are read from the environment (see ``project_tracker_api.app.core.config``);
defaults are ``0.0.0.0``, ``3000`` and ``INFO``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from project_tracker_api.app.core.config import settings
from project_tracker_api.app.main import app

logger = logging.getLogger(__name__)


async def run_api() -> None:
    """Start the API server and block until it stops."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Project Tracker API running on http://localhost:%s", settings.port)
    logger.info("Health check: http://localhost:%s/health", settings.port)
    await server.serve()


def main() -> None:
    # Uvicorn logs startup failures (e.g. port already in use) and raises
    # SystemExit(1) itself; let it through so the exit status survives.
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
