"""Service exceptions and the handlers that render them.

Every failure leaves the service as a JSON body with an ``error`` field.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

LOG = logging.getLogger(__name__)


class AppException(Exception):
    """Base exception for errors returned directly by a handler.

    Attributes:
        message: Human-readable error message sent to the client.
        status_code: HTTP status code to return.
    """

    message: str = "An error occurred"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None):
        self.message = message or self.__class__.message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class RequestValidationFailed(AppException):
    """Required fields missing from the request body (400)."""

    message = "Name and price are required"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppException):
    """Targeted item does not exist (404)."""

    message = "Item not found"
    status_code = status.HTTP_404_NOT_FOUND


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def install_exception_handlers(app: FastAPI) -> None:
    """Register handlers mapping every failure to ``{"error": ...}``."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):  # type: ignore[override]
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):  # type: ignore[override]
        LOG.info("rejected request path=%s errors=%s", request.url.path, exc.errors())
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):  # type: ignore[override]
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):  # type: ignore[override]
        LOG.error("unhandled exception path=%s err=%s", request.url.path, exc, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
