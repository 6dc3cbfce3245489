"""Shared pytest configuration and fixtures.

This module provides global fixtures and configuration that are available
to all tests in the test suite.

Fixtures defined here are automatically available to all tests without explicit
import statements. Keep fixtures small, composable, and focused on setup/teardown.
"""

# pylint: disable=redefined-outer-name

from typing import Any

import pytest

from clients.interfaces.document_store import DocumentStore
from config import get_settings
from core.exceptions import DatabaseConnectionError
from foundation.readiness import ReadinessTracker


class InMemoryDocumentStore(DocumentStore):
    """Dictionary-backed document store for unit tests.

    Set `available = False` to simulate a MongoDB outage: data operations raise
    `DatabaseConnectionError` and pings fail until it is set back to True.
    """

    def __init__(self) -> None:
        self.readiness = ReadinessTracker()
        self.documents: dict[str, dict[str, Any]] = {}
        self.available = True
        self.connected = False
        self.closed = False

    def _check(self) -> None:
        if not self.available:
            self.readiness.mark_disconnected("simulated outage")
            raise DatabaseConnectionError("MongoDB find failed: simulated outage")

    async def connect_async(self) -> None:
        self._check()
        self.connected = True
        self.readiness.mark_connected()

    async def find_one_async(self, key: str) -> dict[str, Any] | None:
        self._check()
        document = self.documents.get(key)
        return dict(document) if document is not None else None

    async def find_all_async(self) -> list[dict[str, Any]]:
        self._check()
        return [dict(document) for document in self.documents.values()]

    async def upsert_async(self, key: str, value: str) -> dict[str, Any]:
        self._check()
        self.documents[key] = {"key": key, "value": value}
        return dict(self.documents[key])

    async def delete_one_async(self, key: str) -> bool:
        self._check()
        return self.documents.pop(key, None) is not None

    async def ping_async(self) -> bool:
        if not self.available:
            self.readiness.mark_disconnected("simulated outage")
            return False
        self.readiness.mark_connected()
        return True

    async def close_async(self) -> None:
        self.closed = True


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Create an empty in-memory document store.

    Returns:
        InMemoryDocumentStore: A store with no documents.
    """
    return InMemoryDocumentStore()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read configuration from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
