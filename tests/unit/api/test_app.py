"""Unit tests for the FastAPI application factory."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from core.exceptions import DatabaseConnectionError


class TestCreateApp:
    """Test suite for create_app()."""

    def test_metadata(self, store) -> None:
        app = create_app(document_store=store)

        assert app.title == "Color API"
        assert app.version == "0.1.0"

    def test_registers_all_routes(self, store) -> None:
        """Test that every color and health route is mounted.

        **Why this test is important:**
          - A missing include_router silently drops a whole endpoint group
        """
        app = create_app(document_store=store)
        paths = set(app.openapi()["paths"])

        assert {"/api", "/api/color", "/api/color/{key}", "/up", "/health", "/ready"} <= paths

    def test_metrics_endpoint_is_exposed(self, test_client: TestClient) -> None:
        test_client.get("/api/color")

        response = test_client.get("/metrics")

        assert response.status_code == 200
        assert "http_requests_total" in response.text


class TestLifespan:
    """Test suite for the application lifespan."""

    def test_connects_on_startup_and_closes_on_shutdown(self, store) -> None:
        """Test that the document store is opened and closed exactly once.

        **Why this test is important:**
          - The connection pool is shared by every request
          - Shutdown must release it, and mark the app as no longer live
        """
        app = create_app(document_store=store)

        with TestClient(app):
            assert store.connected is True
            assert app.state.document_store is store
            assert app.state.shutting_down is False
            assert store.closed is False

        assert store.closed is True
        assert app.state.shutting_down is True

    def test_startup_fails_when_database_unreachable(self, store) -> None:
        """Test that an unreachable database aborts startup."""
        store.available = False
        app = create_app(document_store=store)

        with pytest.raises(DatabaseConnectionError), TestClient(app):
            pass

    def test_builds_store_from_environment_when_not_injected(self, store) -> None:
        with patch("api.app.create_document_store", return_value=store) as factory:
            with TestClient(create_app()) as client:
                assert client.get("/api/color").status_code == 200

        factory.assert_called_once_with()
        assert store.closed is True
