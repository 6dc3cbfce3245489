"""Provider interfaces for external service clients."""

from .document_store import DocumentStore

__all__ = ["DocumentStore"]
