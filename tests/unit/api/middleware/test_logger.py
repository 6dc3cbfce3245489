"""Unit tests for LoggerMiddleware.

This file tests the request logging middleware that provides structured JSON
logging for HTTP requests.

# Test Coverage

The tests cover:
  - Request start logging
  - Request completion logging with status code and timing
  - Health endpoint filtering
  - Access logging in the assembled application
  - Query parameter logging

# Running Tests

Run with: pytest tests/unit/api/middleware/test_logger.py
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.testclient import TestClient

from api.app import create_app
from api.middleware import ExceptionHandlerMiddleware
from api.middleware.logger import LoggerMiddleware

# =============================================================================
# LoggerMiddleware Tests
# =============================================================================


class TestLoggerMiddleware:
    """Test suite for LoggerMiddleware."""

    @pytest.fixture
    def client(self) -> TestClient:
        """Create a test client for an app with only LoggerMiddleware."""
        app = FastAPI()
        app.add_middleware(LoggerMiddleware)

        @app.get("/api/color")
        def list_colors():
            return []

        @app.get("/ready")
        def ready():
            return "ok"

        return TestClient(app)

    def test_logs_request_start_and_completion(self, client: TestClient, caplog) -> None:
        """Test that one request produces a start and a completion record.

        **Why this test is important:**
          - Every request is traceable in the access log
          - Completion carries the status code and duration
        """
        with caplog.at_level(logging.INFO, logger="colorapi.access"):
            response = client.get("/api/color")

        assert response.status_code == 200
        messages = [record.message for record in caplog.records if record.name == "colorapi.access"]
        assert "request started" in messages
        assert messages.index("request started") < messages.index("request completed")

        completed = next(r for r in caplog.records if r.message == "request completed")
        assert completed.response["statuscode"] == 200
        assert completed.response["method"] == "GET"
        assert completed.response["since"] >= 0

    def test_includes_query_string_in_path(self, client: TestClient, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="colorapi.access"):
            client.get("/api/color", params={"colorKey": "primary"})

        started = next(r for r in caplog.records if r.message == "request started")
        assert started.request["path"] == "/api/color?colorKey=primary"

    def test_skips_health_check_requests(self, client: TestClient, caplog) -> None:
        """Test that health check calls are not logged.

        **Why this test is important:**
          - Kubernetes checks health every few seconds and would flood the log
        """
        with caplog.at_level(logging.INFO, logger="colorapi.access"):
            response = client.get("/ready")

        assert response.status_code == 200
        assert not [r for r in caplog.records if r.name == "colorapi.access"]


class TestServiceAccessLog:
    """Test suite for access logging in the assembled application."""

    def test_health_checks_stay_out_of_access_logs(self, store, caplog) -> None:
        """Test that health endpoints produce no access records once the app is configured.

        **Why this test is important:**
          - uvicorn's own access log stays at WARNING for every request
          - LoggerMiddleware is the only writer of access records
          - Kubernetes calls these endpoints every few seconds
        """
        app = create_app(document_store=store)
        access_logger = logging.getLogger("colorapi.access")
        access_logger.addHandler(caplog.handler)
        try:
            with TestClient(app) as client:
                for path in ("/up", "/health", "/ready"):
                    assert client.get(path).status_code == 200
                client.get("/api/color")
        finally:
            access_logger.removeHandler(caplog.handler)

        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        logged_paths = [r.request["path"] for r in caplog.records if r.message == "request started"]
        assert logged_paths == ["/api/color"]

    def test_middleware_stack(self, store) -> None:
        app = create_app(document_store=store)

        assert [middleware.cls for middleware in app.user_middleware] == [
            ExceptionHandlerMiddleware,
            LoggerMiddleware,
            CORSMiddleware,
        ]
