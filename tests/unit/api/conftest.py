"""Shared fixtures for API tests.

This module provides the FastAPI test client wired to an in-memory document
store, so route tests exercise the real repository and exception handlers
without a MongoDB server.
"""

# pylint: disable=redefined-outer-name

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from api.app import create_app


@pytest.fixture
def test_client(store) -> Iterator[TestClient]:
    """Create a FastAPI test client with the app lifespan running.

    Args:
        store: In-memory document store fixture.

    Yields:
        TestClient: A configured test client for making HTTP requests.
    """
    app = create_app(document_store=store)
    with TestClient(app) as client:
        yield client
