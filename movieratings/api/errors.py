"""
Exception handlers rendering every failure as a JSON:API error document.
"""

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from movieratings.api.responses import JsonApiResponse
from movieratings.core.errors import (
    BadRequest,
    InternalError,
    JsonApiError,
    MethodNotAllowed,
    NotFound,
)

logger = logging.getLogger(__name__)


def error_response(error: JsonApiError, headers: dict | None = None) -> JsonApiResponse:
    return JsonApiResponse(error.to_document(), status_code=error.status_code, headers=headers)


def allowed_methods(request: Request) -> List[str]:
    """Every method registered for the request path, across all routes."""
    methods = set()
    scope = dict(request.scope)
    for route in request.app.router.routes:
        match, _ = route.matches(scope)
        if match != Match.NONE and getattr(route, "methods", None):
            methods.update(route.methods)
    return sorted(methods)


async def handle_jsonapi_error(request: Request, exc: JsonApiError) -> JsonApiResponse:
    return error_response(exc)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JsonApiResponse:
    # Malformed JSON bodies land here; never echo parser detail
    logger.debug("Request validation failed: %s", exc.errors())
    return error_response(BadRequest())


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JsonApiResponse:
    if exc.status_code == 405:
        return error_response(
            MethodNotAllowed(),
            headers={"Allow": ", ".join(allowed_methods(request))},
        )
    if exc.status_code == 404:
        return error_response(NotFound())
    error = JsonApiError(str(exc.detail))
    error.status_code = exc.status_code
    return error_response(error, headers=getattr(exc, "headers", None))


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JsonApiResponse:
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(InternalError())


async def handle_unexpected_error(request: Request, exc: Exception) -> JsonApiResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON:API exception handlers to an application."""
    app.add_exception_handler(JsonApiError, handle_jsonapi_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
