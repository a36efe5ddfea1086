"""HTTP boundary for service results.

``unwrap()`` turns an ``Err`` into an ``HTTPException`` with the matching
status code.  The exception handlers registered by ``register_error_handlers``
render every error as ``{"error": "<message>"}``.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from app.core.result import Err, Result
from app.models.enums import ErrorKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.validation: 400,
    ErrorKind.auth: 401,
    ErrorKind.not_found: 404,
    ErrorKind.store: 500,
}


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` or raise the HTTP error for an ``Err``."""
    if isinstance(result, Err):
        raise HTTPException(status_code=ERROR_STATUS[result.kind], detail=result.message)
    return result.value


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{field}: {message}" if field else message


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": _describe_validation_error(exc)})


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error",
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    application.add_exception_handler(RequestValidationError, _validation_exception_handler)
    application.add_exception_handler(Exception, _unhandled_exception_handler)
