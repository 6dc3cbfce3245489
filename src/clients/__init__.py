"""External service clients (MongoDB).

This module provides a factory function for creating a configured document
store from centralized configuration.
"""

from config import MongoConfig, get_settings

from .interfaces.document_store import DocumentStore
from .mongo import MongoClientWrapper


def create_document_store(config: "MongoConfig | None" = None) -> "DocumentStore":
    """Create a configured (not yet connected) document store.

    Args:
        config: Optional MongoConfig. If None, uses settings from
            get_settings().

    Returns:
        DocumentStore instance backed by MongoDB.

    Example:
        ```python
        from clients import create_document_store

        store = create_document_store()
        await store.connect_async()
        ```
    """
    if config is None:
        config = get_settings().mongo

    return MongoClientWrapper.from_config(config)


__all__ = [
    "DocumentStore",
    "MongoClientWrapper",
    "create_document_store",
]
