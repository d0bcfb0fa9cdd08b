"""
Main entrypoint for the Pizza Lookup API.

This module assembles the FastAPI application, sets up logging, builds
the catalog and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn pizza_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.catalog_service import CatalogService


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured first, then the shared catalog is built and
    attached to ``app.state`` so that every request reads the same
    read-only instance.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.catalog = CatalogService.get()

    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
