"""
Unit tests for the users router.

Tests the users router endpoints:
- POST /api/users - Create a user
- GET /api/users/{user_id} - Get a user
- PUT /api/users/{user_id} - Update a user
- DELETE /api/users/{user_id} - Delete a user
"""

import logging
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.deps import get_settings, get_user_registry
from application.ports import RegistryErrorCode, RegistryResult
from backend.main import create_app
from backend.settings import Settings
from infrastructure import InMemoryUserRegistry


# ---------------------------------------------------------------------------
# DI overrides
# ---------------------------------------------------------------------------


@pytest.fixture
def registry():
    """Fresh registry per test."""
    return InMemoryUserRegistry()


@pytest.fixture
def client(registry):
    """Create a TestClient with an isolated registry."""
    settings = Settings(environment="test", _env_file=None)
    app = create_app(settings=settings)
    app.dependency_overrides[get_user_registry] = lambda: registry
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Mock Data
# ---------------------------------------------------------------------------


def user_payload(**overrides):
    """Return a valid create payload."""
    payload = {
        "username": "johndoe",
        "email": "john@example.com",
        "bio": "Software developer",
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Tests: Create User
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestCreateUser:
    """Tests for POST /api/users endpoint."""

    def test_create_user_valid(self, client):
        """Creating a valid user returns 200 with id and capitalized username."""
        response = client.post("/api/users", json=user_payload())

        assert response.status_code == 200
        data = response.json()
        assert data == {
            "id": 1,
            "username": "Johndoe",
            "email": "john@example.com",
            "bio": "Software developer",
        }

    def test_create_user_invalid_email(self, client):
        """An invalid email returns 400 with a field error."""
        response = client.post("/api/users", json=user_payload(email="invalid-email"))

        assert response.status_code == 400
        errors = response.json()["detail"]["errors"]
        assert [e["field"] for e in errors] == ["email"]

    def test_create_user_missing_username(self, client):
        """A missing username returns 400."""
        payload = user_payload()
        del payload["username"]

        response = client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"]["errors"][0]["code"] == "required"

    def test_create_user_short_username(self, client):
        """A username under 3 characters returns 400."""
        response = client.post("/api/users", json=user_payload(username="ab"))

        assert response.status_code == 400
        assert response.json()["detail"]["errors"][0]["code"] == "too_short"

    def test_rejected_create_consumes_no_id(self, client):
        """A failed create does not advance the id counter."""
        client.post("/api/users", json=user_payload(username=""))

        response = client.post("/api/users", json=user_payload(username="jane"))

        assert response.json()["id"] == 1

    def test_create_user_wrong_type(self, client):
        """Non-string fields are rejected by request parsing with 422."""
        response = client.post("/api/users", json=user_payload(username=["x"]))

        assert response.status_code == 422

    def test_create_user_logs(self, client, caplog):
        """Creation is logged with the username and the assigned id."""
        with caplog.at_level(logging.INFO, logger="api.routers.users"):
            client.post("/api/users", json=user_payload())

        assert "Creating user: johndoe" in caplog.text
        assert "User created successfully with ID: 1" in caplog.text


# ---------------------------------------------------------------------------
# Tests: Get User
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestGetUser:
    """Tests for GET /api/users/{user_id} endpoint."""

    def test_get_user_success(self, client):
        client.post("/api/users", json=user_payload())

        response = client.get("/api/users/1")

        assert response.status_code == 200
        assert response.json()["username"] == "Johndoe"

    def test_get_user_not_found(self, client):
        response = client.get("/api/users/999")

        assert response.status_code == 404

    def test_get_user_non_integer_id(self, client):
        response = client.get("/api/users/abc")

        assert response.status_code == 422


# ---------------------------------------------------------------------------
# Tests: Update User
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestUpdateUser:
    """Tests for PUT /api/users/{user_id} endpoint."""

    def test_update_full_body_overwrites(self, client):
        """A valid full body replaces the stored fields."""
        client.post("/api/users", json={"username": "abc", "email": "a@b.com", "bio": "x"})

        response = client.put(
            "/api/users/1",
            json={"username": "abc", "email": "new@b.com", "bio": "y"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "username": "abc",
            "email": "new@b.com",
            "bio": "y",
        }

    def test_update_bio_only_rejected(self, client):
        """Username and email are required on update as on create."""
        client.post("/api/users", json={"username": "abc", "email": "a@b.com", "bio": "x"})

        response = client.put("/api/users/1", json={"bio": "y"})

        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["detail"]["errors"]}
        assert fields == {"username", "email"}
        assert client.get("/api/users/1").json()["bio"] == "x"

    def test_update_without_bio_keeps_stored_bio(self, client):
        """An omitted bio keeps its stored value."""
        client.post("/api/users", json=user_payload())

        response = client.put(
            "/api/users/1",
            json={"username": "johndoe", "email": "john@example.com"},
        )

        assert response.status_code == 200
        assert response.json()["bio"] == "Software developer"

    def test_update_not_found(self, client, registry):
        response = client.put("/api/users/999", json=user_payload())

        assert response.status_code == 404
        assert registry.count() == 0

    def test_update_invalid_email(self, client):
        client.post("/api/users", json=user_payload())

        response = client.put("/api/users/1", json=user_payload(email="invalid-email"))

        assert response.status_code == 400
        assert client.get("/api/users/1").json()["email"] == "john@example.com"

    def test_update_keeps_id(self, client):
        client.post("/api/users", json=user_payload())

        response = client.put("/api/users/1", json=user_payload(id=5, username="renamed"))

        assert response.json()["id"] == 1
        assert response.json()["username"] == "renamed"


# ---------------------------------------------------------------------------
# Tests: Delete User
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestDeleteUser:
    """Tests for DELETE /api/users/{user_id} endpoint."""

    def test_delete_user_success(self, client):
        client.post("/api/users", json=user_payload())

        response = client.delete("/api/users/1")

        assert response.status_code == 204
        assert client.get("/api/users/1").status_code == 404

    def test_delete_user_not_found(self, client):
        response = client.delete("/api/users/999")

        assert response.status_code == 404

    def test_ids_not_reused(self, client):
        client.post("/api/users", json=user_payload())
        client.delete("/api/users/1")

        response = client.post("/api/users", json=user_payload(username="jane"))

        assert response.json()["id"] == 2


@pytest.mark.unit
class TestRegistryRejection:
    """Registry INVALID_INPUT outcomes surface as 400."""

    def test_create_invalid_input_returns_400(self):
        """A registry rejection after validation passed is still a bad request."""
        mock_registry = MagicMock()
        mock_registry.create.return_value = RegistryResult(
            success=False,
            error="Username must not be blank",
            error_code=RegistryErrorCode.INVALID_INPUT,
        )
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        app.dependency_overrides[get_user_registry] = lambda: mock_registry
        app.dependency_overrides[get_settings] = lambda: settings

        try:
            response = TestClient(app).post("/api/users", json=user_payload())
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 400
        assert response.json()["detail"] == {
            "message": "Username must not be blank",
            "errors": [],
        }
        mock_registry.create.assert_called_once()


@pytest.mark.unit
class TestHealth:
    """Tests for GET /health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
