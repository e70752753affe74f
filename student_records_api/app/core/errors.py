"""
Error taxonomy and the handlers that render it.

Every failure a client can observe is one of the ``StudentAPIError``
subclasses below.  Handlers registered by
``register_exception_handlers`` turn them into a plain-text body with
the matching status code.  Framework level failures (body validation,
unsupported methods) are folded into the same taxonomy so clients see
one consistent set of messages.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class StudentAPIError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInput(StudentAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid input"


class InvalidID(StudentAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid ID"


class InvalidEndpoint(StudentAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid endpoint"


class StudentNotFound(StudentAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Student not found"


class MethodNotAllowed(StudentAPIError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    message = "Method not allowed"


class SummaryGenerationFailed(StudentAPIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Error generating summary"


def error_response(exc: StudentAPIError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def _handle_api_error(request: Request, exc: StudentAPIError) -> PlainTextResponse:
    logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.info("%s %s: invalid body: %s", request.method, request.url.path, exc.errors())
    return error_response(InvalidInput())


async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        response = error_response(MethodNotAllowed())
        # Starlette fills in the Allow header for routed 405s.
        if exc.headers:
            response.headers.update(exc.headers)
        return response
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that render errors as plain text."""
    app.add_exception_handler(StudentAPIError, _handle_api_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
