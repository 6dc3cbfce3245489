"""Document store provider interface.

This module defines the `DocumentStore` ABC used by the color repository.
Concrete implementations live in the parent `clients` package
(e.g., `MongoClientWrapper`). Configuration classes are in `config`.
"""

from abc import ABC, abstractmethod
from typing import Any

from foundation.readiness import ReadinessTracker


class DocumentStore(ABC):
    """Abstract base class for key/value document stores.

    A store holds one document per key in a single collection. Implementations
    keep one persistent connection (or pool) for the process lifetime and
    report connectivity into `readiness`.

    Implementations must raise `DatabaseConnectionError` when the backing
    server cannot be reached. They never retry internally.
    """

    readiness: ReadinessTracker

    @abstractmethod
    async def connect_async(self) -> None:
        """Open the connection and verify the server is reachable.

        Raises:
            DatabaseConnectionError: If the server is unreachable.
        """

    @abstractmethod
    async def find_one_async(self, key: str) -> dict[str, Any] | None:
        """Return the document stored under `key`, or None."""

    @abstractmethod
    async def find_all_async(self) -> list[dict[str, Any]]:
        """Return every document in the collection."""

    @abstractmethod
    async def upsert_async(self, key: str, value: str) -> dict[str, Any]:
        """Create or replace the document stored under `key`.

        Returns:
            The stored document.
        """

    @abstractmethod
    async def delete_one_async(self, key: str) -> bool:
        """Delete the document stored under `key`.

        Returns:
            True if a document was deleted, False if none existed.
        """

    @abstractmethod
    async def ping_async(self) -> bool:
        """Check connectivity, updating `readiness` with the outcome.

        Returns:
            True if the server answered.
        """

    @abstractmethod
    async def close_async(self) -> None:
        """Release the connection. Safe to call more than once."""
