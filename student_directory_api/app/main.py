"""
Main entrypoint for the Student Directory API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn student_directory_api.app.main:app --port 8090

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .api.router import router
from .services.student_service import StudentService


def create_app(service: Optional[StudentService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[StudentService]
        Store backing the application.  A new, empty store is created
        when omitted, so every application starts without records.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the store and
    # routers can log from the first request on.
    setup_logging(settings.log_level, settings.log_file)

    # Everything below "/students/" is an id, so no slash redirects.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        redirect_slashes=False,
    )
    app.state.student_service = service if service is not None else StudentService()

    register_exception_handlers(app)
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
