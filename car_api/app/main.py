"""
Main entrypoint for the car API.

This module assembles the FastAPI application: it sets up logging,
CORS, the error handlers and the routers, and manages the MongoDB
client's lifecycle.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn car_api.app.main:app --reload

The interactive documentation is served at ``settings.docs_url``
(``/api-docs`` by default).
"""

from contextlib import asynccontextmanager
import logging
from typing import Any, AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import close_client, create_client
from .core.errors import APIError, api_error_handler, http_error_handler, validation_error_handler
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, mongo_client: Any = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.
    mongo_client : Any
        An already constructed Motor-compatible client.  When omitted
        a client is created from ``settings.mongodb_url`` on startup.
        Either way the client is closed on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        client = mongo_client if mongo_client is not None else create_client(settings)
        app.state.settings = settings
        app.state.mongo_client = client
        logger.info("%s %s started", settings.project_name, settings.api_version)
        try:
            yield
        finally:
            close_client(client)
            app.state.mongo_client = None

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        servers=[{"url": settings.local_server_url, "description": "Servidor local"}],
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
