"""
Main entrypoint for the FurryMatch API.

This module assembles the FastAPI application: it sets up logging,
registers the error translation handlers and mounts the versioned
routers under ``/api``.  ``create_app`` builds the app, which is then
instantiated at import time as ``app``, e.g.::

    uvicorn furrymatch_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .core.config import settings
from .core.db import init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Apply migrations at startup.  This creates the database file if
    # it does not exist yet.
    init_db()
    logger.info("%s %s started", settings.project_name, settings.api_version)
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first, so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api")
    return app


app = create_app()
