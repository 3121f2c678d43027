"""FastAPI dependencies for reaching the catalog."""

from fastapi import Depends, HTTPException, Request

from core.catalog import Catalog
from core.content import CatalogNotLoadedError, CatalogStore


def get_store(request: Request) -> CatalogStore:
    """The store held on the application state."""
    return request.app.state.catalog_store


def get_catalog(store: CatalogStore = Depends(get_store)) -> Catalog:
    """Current catalog snapshot for this request."""
    try:
        return store.get()
    except CatalogNotLoadedError:
        raise HTTPException(status_code=503, detail="Catalog not loaded") from None
