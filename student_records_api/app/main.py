"""
Main entrypoint for the Student Records API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn student_records_api.app.main:app

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.student_service import StudentStore
from .services.summary_service import SummaryService


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[StudentStore] = None,
    summary_service: Optional[SummaryService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment derived
        ``settings`` instance.
    store : Optional[StudentStore]
        Record store to serve.  A new empty store is created if
        omitted, so every app owns its own records.
    summary_service : Optional[SummaryService]
        Client for the text-generation service.  Built from
        ``settings`` if omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else StudentStore(settings.id_min, settings.id_max)
    app.state.summary_service = summary_service or SummaryService(
        base_url=settings.summary_endpoint,
        model_name=settings.model_name,
        timeout=settings.summary_timeout,
    )

    register_exception_handlers(app)

    # Routes are served from the root: the public paths are /students...
    app.include_router(v1_router)

    logging.getLogger(__name__).debug(
        "Summaries via %s (model %s)", settings.summary_endpoint, settings.model_name
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
