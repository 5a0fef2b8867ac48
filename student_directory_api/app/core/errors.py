"""
Exception handler producing status‑only error responses.

Callers of the API only ever learn the HTTP status of a failed
request: error responses carry no body.  ``register_exception_handlers``
installs a handler that strips the JSON ``detail`` FastAPI would
otherwise send for every ``HTTPException``, whether raised by a route
(400, 404, 405) or by the router itself (404 for unknown paths, 405 on
``/students``).
"""

from fastapi import FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Return the exception's status code (and headers such as ``Allow``) with no body."""
    return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
