"""
Pytest fixtures shared by every service's tests
"""

from typing import AsyncIterator, Optional

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from campus_shared.utils.security import SecurityUtils
from course_service.config import CourseSettings
from course_service.main import create_app as create_course_app
from gateway_service.config import GatewaySettings
from gateway_service.main import create_app as create_gateway_app
from identity_service.config import IdentitySettings
from identity_service.main import create_app as create_identity_app
from student_service.config import StudentSettings
from student_service.main import create_app as create_student_app

SECRET = "test-shared-secret"
IDENTITY_URL = "http://identity.test"
STUDENT_URL = "http://students.test"
COURSE_URL = "http://courses.test"

COMMON = {"jwt_secret_key": SECRET, "log_format": "console", "log_level": "WARNING"}


def make_token(user_id: int = 1, name: str = "alice", secret: str = SECRET, **kwargs) -> str:
    """Issue a token the way the identity service does"""
    return SecurityUtils(secret).generate_token(user_id, name, **kwargs)


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def gateway_settings() -> GatewaySettings:
    return GatewaySettings(
        identity_service_url=IDENTITY_URL,
        student_service_url=STUDENT_URL,
        course_service_url=COURSE_URL,
        **COMMON,
    )


@pytest.fixture
def identity_app() -> FastAPI:
    return create_identity_app(IdentitySettings(**COMMON))


@pytest.fixture
def student_app() -> FastAPI:
    return create_student_app(StudentSettings(**COMMON))


@pytest.fixture
def course_app() -> FastAPI:
    return create_course_app(CourseSettings(**COMMON))


@pytest.fixture
def identity_client(identity_app) -> TestClient:
    return TestClient(identity_app)


@pytest.fixture
def student_client(student_app) -> TestClient:
    return TestClient(student_app)


@pytest.fixture
def course_client(course_app) -> TestClient:
    return TestClient(course_app)


async def _gateway_client(
    settings: GatewaySettings, backend_client: Optional[httpx.AsyncClient] = None
) -> AsyncIterator[httpx.AsyncClient]:
    app = create_gateway_app(settings, client=backend_client)
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://gateway.test"
    ) as client:
        yield client


@pytest.fixture
async def gateway(gateway_settings) -> AsyncIterator[httpx.AsyncClient]:
    """Gateway whose backend calls go over real httpx transports (mock with respx)"""
    async for client in _gateway_client(gateway_settings):
        yield client


@pytest.fixture
async def backends(identity_app, student_app, course_app) -> AsyncIterator[httpx.AsyncClient]:
    """One client that reaches all three backends in-process"""
    mounts = {
        IDENTITY_URL: httpx.ASGITransport(app=identity_app),
        STUDENT_URL: httpx.ASGITransport(app=student_app),
        COURSE_URL: httpx.ASGITransport(app=course_app),
    }
    async with httpx.AsyncClient(mounts=mounts) as client:
        yield client


@pytest.fixture
async def stack(gateway_settings, backends) -> AsyncIterator[httpx.AsyncClient]:
    """Gateway wired to in-process backends"""
    async for client in _gateway_client(gateway_settings, backends):
        yield client


@pytest.fixture
def token_factory():
    """Callable issuing tokens signed with the shared test secret"""
    return make_token


@pytest.fixture
def auth_headers() -> dict:
    """Authorization header for user 1 (alice)"""
    return bearer(make_token(1, "alice"))


@pytest.fixture
def other_auth_headers() -> dict:
    """Authorization header for user 2 (bob)"""
    return bearer(make_token(2, "bob"))
