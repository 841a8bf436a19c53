"""
Unit tests for the error handling middleware and decorators.

Uses a throwaway FastAPI app so the behaviour is checked through real
HTTP responses rather than by calling the handlers directly.
"""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel

from app.middleware.error_handling import (
    ConflictError,
    NotFoundError,
    ServiceError,
    ValidationError,
    fallback_on_error,
    handle_endpoint_errors,
    invalid_data_message,
    setup_error_handling,
)


class Payload(BaseModel):
    count: int


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    setup_error_handling(app, debug=False)

    @app.get("/missing")
    @handle_endpoint_errors("Get thing")
    async def missing():
        raise NotFoundError("Thing not found")

    @app.get("/broken")
    @handle_endpoint_errors("Get dashboard stats", "Failed to fetch dashboard stats")
    async def broken():
        raise RuntimeError("connection refused")

    @app.get("/default-message")
    @handle_endpoint_errors("Get thing")
    async def default_message():
        raise KeyError("oops")

    @app.get("/http")
    @handle_endpoint_errors("Get thing")
    async def http():
        raise HTTPException(status_code=418, detail="I'm a teapot")

    @app.post("/api/subjects")
    async def create(payload: Payload):
        return payload

    return TestClient(app)


# =============================================================================
# Exception Classes
# =============================================================================


class TestServiceErrors:
    @pytest.mark.parametrize(
        "error_cls,status,code",
        [
            (ValidationError, 400, "validation_error"),
            (NotFoundError, 404, "not_found"),
            (ConflictError, 409, "conflict"),
            (ServiceError, 500, "service_error"),
        ],
    )
    def test_defaults(self, error_cls, status, code) -> None:
        error = error_cls("message")
        assert error.status_code == status
        assert error.error_code == code
        assert error.message == "message"

    def test_overrides(self) -> None:
        error = ServiceError("m", status_code=503, error_code="unavailable")
        assert error.status_code == 503
        assert error.error_code == "unavailable"


# =============================================================================
# Middleware Responses
# =============================================================================


class TestErrorResponses:
    def test_not_found(self, client) -> None:
        response = client.get("/missing")

        assert response.status_code == 404
        body = response.json()
        assert body["message"] == "Thing not found"
        assert body["error"] == "not_found"
        assert len(body["error_id"]) == 8

    def test_unexpected_error_uses_fixed_message(self, client) -> None:
        response = client.get("/broken")

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Failed to fetch dashboard stats"
        assert "connection refused" not in response.text

    def test_default_message_from_operation(self, client) -> None:
        response = client.get("/default-message")

        assert response.status_code == 500
        assert response.json()["message"] == "Failed to get thing"

    def test_http_exception_passes_through(self, client) -> None:
        response = client.get("/http")

        assert response.status_code == 418
        assert response.json()["message"] == "I'm a teapot"

    def test_unknown_route(self, client) -> None:
        response = client.get("/nope")

        assert response.status_code == 404
        assert "message" in response.json()

    def test_invalid_body_is_400(self, client) -> None:
        response = client.post("/api/subjects", json={"count": "many"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid subject data"


class TestInvalidDataMessage:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/api/subjects", "Invalid subject data"),
            ("/api/study-sessions", "Invalid study session data"),
            ("/api/todos/3", "Invalid todo data"),
            ("/api/analytics/summary", "Invalid request data"),
            ("/other", "Invalid request data"),
        ],
    )
    def test_message_by_resource(self, path, expected) -> None:
        assert invalid_data_message(path) == expected


# =============================================================================
# fallback_on_error
# =============================================================================


class TestFallbackOnError:
    @pytest.mark.asyncio
    async def test_returns_value_on_success(self) -> None:
        @fallback_on_error(0)
        async def compute():
            return 7

        assert await compute() == 7

    @pytest.mark.asyncio
    async def test_returns_default_on_error(self) -> None:
        @fallback_on_error(0, operation="Compute")
        async def compute():
            raise RuntimeError("boom")

        assert await compute() == 0

    @pytest.mark.asyncio
    async def test_logs_failure(self, caplog) -> None:
        @fallback_on_error([])
        async def compute():
            raise ValueError("bad")

        with caplog.at_level("WARNING"):
            assert await compute() == []

        assert "falling back" in caplog.text
