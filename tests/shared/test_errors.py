"""
Error Envelope tests
"""

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from campus_shared.utils.errors import (
    Conflict,
    InvalidCredential,
    MissingCredential,
    NotFound,
    ServiceError,
    UpstreamError,
    UpstreamUnavailable,
    ValidationError,
    install_exception_handlers,
)


class Body(BaseModel):
    name: str


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    install_exception_handlers(app)

    @app.get("/missing")
    async def missing():
        raise MissingCredential("No authorization token was sent")

    @app.get("/conflict")
    async def conflict():
        raise Conflict("Already there", extra={"field": "name"})

    @app.post("/body")
    async def body(payload: Body):
        return payload

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    return TestClient(app, raise_server_exceptions=False)


class TestServiceError:
    @pytest.mark.parametrize(
        "exc_class,status_code",
        [
            (MissingCredential, 401),
            (InvalidCredential, 403),
            (ValidationError, 400),
            (NotFound, 404),
            (Conflict, 400),
            (UpstreamUnavailable, 500),
            (UpstreamError, 500),
        ],
    )
    def test_status_codes(self, exc_class, status_code):
        assert exc_class("x").status_code == status_code

    def test_envelope_defaults_message_to_error(self):
        assert NotFound().to_envelope() == {"error": "Not found", "message": "Not found"}

    def test_status_override(self):
        exc = ServiceError({"error": "teapot"}, error="Upstream", status_code=418)
        assert exc.status_code == 418
        assert exc.to_envelope() == {"error": "Upstream", "message": {"error": "teapot"}}

    def test_upstream_error_keeps_backend_status(self):
        response = UpstreamError(
            {"error": "Course not found"}, error="Error deleting course", status_code=404
        ).to_response()

        assert response.status_code == 404
        assert json.loads(response.body) == {
            "error": "Error deleting course",
            "message": {"error": "Course not found"},
        }


class TestExceptionHandlers:
    def test_service_error(self, client):
        response = client.get("/missing")
        assert response.status_code == 401
        assert response.json() == {
            "error": "Missing credential",
            "message": "No authorization token was sent",
        }

    def test_extra_fields_kept(self, client):
        response = client.get("/conflict")
        assert response.status_code == 400
        assert response.json()["field"] == "name"

    def test_unknown_path(self, client):
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert set(response.json()) == {"error", "message"}

    def test_invalid_json(self, client):
        response = client.post(
            "/body", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid JSON format"

    def test_unhandled_exception(self, client):
        response = client.get("/boom")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "message": "kaboom"}
