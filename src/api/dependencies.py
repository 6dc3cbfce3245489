"""FastAPI dependencies shared by the routers."""

from typing import Annotated

from fastapi import Depends, Request

from clients.interfaces.document_store import DocumentStore
from core.exceptions import DatabaseConnectionError
from core.services.color_repository import ColorRepository


def get_document_store(request: Request) -> DocumentStore:
    """Return the process-wide document store opened by the app lifespan.

    Raises:
        DatabaseConnectionError: If the lifespan has not opened a store.
    """
    store = getattr(request.app.state, "document_store", None)
    if store is None:
        raise DatabaseConnectionError("Document store is not initialized")
    return store


def get_color_repository(
    store: Annotated[DocumentStore, Depends(get_document_store)],
) -> ColorRepository:
    return ColorRepository(store=store)


ColorRepositoryDep = Annotated[ColorRepository, Depends(get_color_repository)]
