"""Service layer for color storage.

This module translates domain operations on colors (get one, get all, upsert
by key, delete by key) into document store calls. It has no FastAPI
dependencies; the API layer maps the raised exceptions to HTTP status codes.
"""

from __future__ import annotations

import attrs

from clients.interfaces.document_store import DocumentStore
from core.exceptions import BadRequestError, NotFoundError
from core.models import Color


def _validate_key(key: str) -> str:
    if not isinstance(key, str) or not key.strip():
        raise BadRequestError("Color key must be a non-empty string")
    return key


@attrs.define(frozen=True, slots=True)
class ColorRepository:
    """Repository of colors stored one document per key.

    Attributes:
        store: Document store instance (agnostic to implementation).

    Example:
        ```python
        repository = ColorRepository(store=create_document_store())
        color = await repository.upsert_async("primary", "blue")
        assert (await repository.get_by_key_async("primary")) == color
        ```
    """

    store: DocumentStore

    async def get_by_key_async(self, key: str) -> Color:
        """Fetch the color stored under `key`.

        Raises:
            BadRequestError: If `key` is blank.
            NotFoundError: If no color is stored under `key`.
            DatabaseConnectionError: If the store is unreachable.
        """
        _validate_key(key)
        document = await self.store.find_one_async(key)
        if document is None:
            msg = f"Color '{key}' not found"
            raise NotFoundError(msg)
        return Color.from_document(document)

    async def get_all_async(self) -> list[Color]:
        """Fetch every stored color, ordered by key."""
        documents = await self.store.find_all_async()
        return sorted((Color.from_document(d) for d in documents), key=lambda color: color.key)

    async def upsert_async(self, key: str, value: str) -> Color:
        """Create the color if absent, otherwise replace its value.

        Returns:
            The resulting record.

        Raises:
            BadRequestError: If `key` is blank, `value` is not a string, or the
                store rejects the document.
            DatabaseConnectionError: If the store is unreachable.
        """
        _validate_key(key)
        if not isinstance(value, str):
            raise BadRequestError("Color value must be a string")
        document = await self.store.upsert_async(key, value)
        return Color.from_document(document)

    async def delete_async(self, key: str) -> None:
        """Delete the color stored under `key`.

        Raises:
            BadRequestError: If `key` is blank.
            NotFoundError: If no color is stored under `key`.
            DatabaseConnectionError: If the store is unreachable.
        """
        _validate_key(key)
        if not await self.store.delete_one_async(key):
            msg = f"Color '{key}' not found"
            raise NotFoundError(msg)
