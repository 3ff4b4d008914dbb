"""
Error taxonomy and Error Envelope rendering

All services raise ServiceError subclasses; install_exception_handlers()
turns them, and anything else that escapes a route, into
{"error": ..., "message": ...} bodies.
"""

from typing import Any, Dict, Optional, Union

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from campus_shared.schemas.envelope import ErrorEnvelope

logger = structlog.get_logger(__name__)

MessageT = Union[str, Dict[str, Any], list, None]


class ServiceError(Exception):
    """Base class for every failure that maps to an Error Envelope"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Internal server error"

    def __init__(
        self,
        message: MessageT = None,
        *,
        error: Optional[str] = None,
        status_code: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        self.message = message if message is not None else self.error
        if error is not None:
            self.error = error
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra or {}
        super().__init__(self.message if isinstance(self.message, str) else self.error)

    def to_envelope(self) -> Dict[str, Any]:
        """Render as an Error Envelope body"""
        envelope = ErrorEnvelope(error=self.error, message=self.message, **self.extra)
        return envelope.model_dump()

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_envelope())


class MissingCredential(ServiceError):
    """No Authorization header was sent"""
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Missing credential"


class InvalidCredential(ServiceError):
    """Malformed, tampered or expired bearer token"""
    status_code = status.HTTP_403_FORBIDDEN
    error = "Invalid credential"


class ValidationError(ServiceError):
    """A required field is missing or malformed"""
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Validation error"


class NotFound(ServiceError):
    """Resource does not exist or is not owned by the caller"""
    status_code = status.HTTP_404_NOT_FOUND
    error = "Not found"


class Conflict(ServiceError):
    """Duplicate name or enrollment"""
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Conflict"


class UpstreamUnavailable(ServiceError):
    """A backend could not be reached at all"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "Upstream unavailable"


class UpstreamError(ServiceError):
    """A backend answered with an error status; the status passes through"""
    error = "Upstream error"


def install_exception_handlers(app: FastAPI) -> None:
    """Register handlers so that every failure leaves as an Error Envelope"""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        logger.info(
            "Request failed",
            method=request.method,
            path=request.url.path,
            status_code=exc.status_code,
            error=exc.error,
        )
        return exc.to_response()

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Unknown paths and unsupported methods"""
        envelope = ErrorEnvelope(error="Request failed", message=exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=envelope.model_dump(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "Bad request body",
            method=request.method,
            path=request.url.path,
            errors=len(exc.errors()),
        )
        envelope = ErrorEnvelope(
            error="Invalid JSON format",
            message="Request body could not be parsed",
            endpoint=f"{request.method} {request.url.path}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=envelope.model_dump(),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            method=request.method,
            url=str(request.url),
            exc_info=True,
        )
        envelope = ErrorEnvelope(error="Internal server error", message=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=envelope.model_dump(),
        )
