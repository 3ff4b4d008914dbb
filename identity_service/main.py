"""
Identity Service - FastAPI Application
Account creation and access token issuance
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from campus_shared import __version__
from campus_shared.utils.errors import install_exception_handlers
from campus_shared.utils.logger import setup_logging
from campus_shared.utils.middleware import install_request_logging
from campus_shared.utils.security import SecurityUtils
from campus_shared.utils.storage import InMemoryRecordStore
from identity_service.config import IdentitySettings, get_settings
from identity_service.models.user import User
from identity_service.routes import auth, health
from identity_service.services.auth_service import AuthService

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    settings: IdentitySettings = app.state.settings
    logger.info(
        "Starting Identity Service",
        environment=settings.environment,
        port=settings.port,
        secret_configured=settings.secret_configured
    )
    yield
    logger.info("Identity Service shutdown complete")


def create_app(settings: Optional[IdentitySettings] = None) -> FastAPI:
    """Build the identity service application"""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.logging_config_path)

    app = FastAPI(
        title="Campus - Identity Service",
        description="Account creation and access token issuance",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    users = InMemoryRecordStore(User)
    security = SecurityUtils(settings.jwt_secret_key, settings.jwt_algorithm)

    app.state.settings = settings
    app.state.users = users
    app.state.auth_service = AuthService(
        users, security, token_expire_minutes=settings.access_token_expire_minutes
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_request_logging(app)
    install_exception_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(auth.router, prefix="/auth", tags=["Authentication"])

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
