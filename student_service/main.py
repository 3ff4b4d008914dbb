"""
Student Service - FastAPI Application
Owner-scoped student records
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from campus_shared import __version__
from campus_shared.utils.credentials import CredentialVerifier
from campus_shared.utils.errors import install_exception_handlers
from campus_shared.utils.logger import setup_logging
from campus_shared.utils.middleware import install_request_logging
from campus_shared.utils.storage import InMemoryRecordStore
from student_service.config import StudentSettings, get_settings
from student_service.models.student import Student
from student_service.routes import health, students

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    settings: StudentSettings = app.state.settings
    logger.info(
        "Starting Student Service",
        environment=settings.environment,
        port=settings.port,
        secret_configured=settings.secret_configured
    )
    yield
    logger.info("Student Service shutdown complete")


def create_app(settings: Optional[StudentSettings] = None) -> FastAPI:
    """Build the student service application"""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.logging_config_path)

    app = FastAPI(
        title="Campus - Student Service",
        description="Owner-scoped student records",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.students = InMemoryRecordStore(Student, owner_field="user_id")
    app.state.verifier = CredentialVerifier(settings.jwt_secret_key, settings.jwt_algorithm)

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
    app.include_router(students.router, prefix="/students", tags=["Students"])

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
