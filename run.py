"""Entry point for the Student Directory API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root::

    python run.py

Host, port and log level come from ``Settings`` (environment variables
``HOST``, ``PORT`` and ``LOG_LEVEL``); by default the service listens
on ``0.0.0.0:8090``.  All records are kept in memory and are lost when
the process stops.
"""
import asyncio
import logging

from uvicorn import Config, Server

from student_directory_api.app.core.config import settings
from student_directory_api.app.core.logging_config import uvicorn_log_config
from student_directory_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=uvicorn_log_config(settings.log_level),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
