"""
API Gateway - FastAPI Application
Authenticates callers and forwards requests to the identity, student and
course services
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from campus_shared import __version__
from campus_shared.utils.credentials import CredentialVerifier
from campus_shared.utils.errors import install_exception_handlers
from campus_shared.utils.logger import setup_logging
from campus_shared.utils.middleware import install_request_logging
from gateway_service.config import GatewaySettings, get_settings
from gateway_service.routes import health
from gateway_service.routes.proxy import build_proxy_router
from gateway_service.services.forwarder import ProxyForwarder
from gateway_service.services.registry import BackendRegistry
from gateway_service.services.translator import ResponseTranslator

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    settings: GatewaySettings = app.state.settings
    logger.info(
        "Starting API Gateway",
        environment=settings.environment,
        port=settings.port,
        registry=repr(app.state.registry),
        secret_configured=settings.secret_configured
    )
    yield
    logger.info("API Gateway shutdown complete")


def create_app(
    settings: Optional[GatewaySettings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the gateway application

    Args:
        settings: Gateway settings; read from the environment when omitted
        client: Optional shared client for backend calls. When omitted each
            backend call opens its own client.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.logging_config_path)

    app = FastAPI(
        title="Campus - API Gateway",
        description="Authenticating gateway for the identity, student and course services",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    registry = BackendRegistry.from_settings(settings)

    app.state.settings = settings
    app.state.registry = registry
    app.state.verifier = CredentialVerifier(settings.jwt_secret_key, settings.jwt_algorithm)
    app.state.forwarder = ProxyForwarder(
        registry, client=client, timeout=settings.upstream_timeout_seconds
    )
    app.state.translator = ResponseTranslator()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
        allow_headers=["Content-Type", "Authorization"],
    )
    install_request_logging(app)
    install_exception_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(build_proxy_router())

    return app


def run() -> None:
    """Console entry point"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


app = create_app()


if __name__ == "__main__":
    run()
