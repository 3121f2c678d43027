"""
Content management API routes.

Endpoints:
- POST /api/content/refresh - Reload course structure and publish a new catalog
- GET /sitemap.xml - Sitemap for search engines
"""

import logging

import sentry_sdk
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from core.catalog import Catalog
from core.config import get_site_url
from core.content import CatalogStore
from core.seo import generate_sitemap
from web_api.dependencies import get_catalog, get_store
from web_api.schemas import RefreshResponse

router = APIRouter(tags=["content"])

logger = logging.getLogger(__name__)


@router.post("/api/content/refresh", response_model=RefreshResponse)
def manual_refresh(store: CatalogStore = Depends(get_store)):
    """
    Reload the course structure and swap in a new catalog.

    On failure the previous catalog stays in place. The rebuild reads files,
    so this handler runs in the threadpool.
    TODO: Add admin authentication
    """
    logger.info("Manual catalog refresh requested...")

    try:
        catalog = store.refresh()
    except Exception as e:
        logger.error(f"Catalog refresh failed: {e}")
        sentry_sdk.capture_exception(e)
        raise HTTPException(status_code=500, detail=f"Catalog refresh failed: {e}") from e

    logger.info("Catalog refreshed successfully via manual request")
    return RefreshResponse(status="ok", message="Catalog refreshed", topics=len(catalog))


@router.get("/sitemap.xml")
async def sitemap(catalog: Catalog = Depends(get_catalog)):
    """Sitemap covering static pages and every tutorial page."""
    xml = generate_sitemap(catalog.entries, get_site_url())
    return Response(content=xml, media_type="application/xml")
