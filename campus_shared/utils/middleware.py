"""
HTTP middleware shared by the campus services
"""

from fastapi import FastAPI, Request
import structlog

logger = structlog.get_logger(__name__)


def install_request_logging(app: FastAPI) -> None:
    """Log every request on the way in and out"""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(
            "Request received",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown"
        )

        response = await call_next(request)

        logger.info(
            "Request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code
        )

        return response
