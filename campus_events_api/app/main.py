"""
Main entrypoint for the Campus Events API.

This module assembles the FastAPI application, sets up logging,
creates the entity store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn campus_events_api.app.main:app --reload

The store lives on ``app.state.storage`` for the lifetime of the
application; services are bound to it per request through the
dependencies in ``api.deps``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.sample_data import load_sample_data
from .core.storage import MemoryStorage, Storage


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment.
    storage : Optional[Storage]
        Store to serve.  When omitted a new ``MemoryStorage`` is
        created and, if ``settings.seed_sample_data`` is set, filled
        with the sample events.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that setup below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    if storage is None:
        storage = MemoryStorage()
        if settings.seed_sample_data:
            load_sample_data(storage)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.storage = storage

    register_error_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("%s %s ready under %s", settings.project_name, settings.api_version, settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# ``uvicorn`` can discover it.
app = create_app()
