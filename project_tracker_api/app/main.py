"""
Main entrypoint for the Project Tracker API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn project_tracker_api.app.main:app --reload

or through ``run.py`` at the repository root.
"""

from typing import Optional

from fastapi import FastAPI

from .api.errors import register_exception_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .data.project_store import ProjectStore
from .services.project_service import ProjectService


def create_app(store: Optional[ProjectStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each application owns its own record set: a fresh
    :class:`ProjectStore` is created unless one is passed in, and the
    :class:`ProjectService` wrapping it is kept on ``app.state``.

    Parameters
    ----------
    store : Optional[ProjectStore]
        Store to serve from.  Tests pass one in to inspect it directly.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.project_service = ProjectService(store if store is not None else ProjectStore())

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
