"""
Topic API routes.

Endpoints:
- GET /api/topics/{topic_id} - Full topic with prev/next navigation
- GET /api/topics/{topic_id}/navigation - Prev/next topics only
- GET /api/topics/{topic_id}/related - Other topics from the same course
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from core.catalog import Catalog
from core.catalog.navigation import RELATED_TOPICS_LIMIT
from web_api.dependencies import get_catalog
from web_api.schemas import (
    NavigationResponse,
    TopicSummary,
    serialize_navigation,
    serialize_topic,
    summarize,
)

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("/{topic_id}")
async def get_topic(topic_id: str, catalog: Catalog = Depends(get_catalog)):
    """Get a topic with its lesson payload, ancestry and navigation."""
    entry = catalog.find_by_id(topic_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Topic not found: {topic_id}")

    return serialize_topic(entry, catalog.get_navigation(topic_id))


@router.get("/{topic_id}/navigation", response_model=NavigationResponse)
async def get_topic_navigation(topic_id: str, catalog: Catalog = Depends(get_catalog)):
    """Get the previous and next topics.

    Unknown topic ids return {prev: null, next: null} rather than 404, so a
    stale link just shows no navigation.
    """
    return serialize_navigation(catalog.get_navigation(topic_id))


@router.get("/{topic_id}/related", response_model=list[TopicSummary])
async def get_related(
    topic_id: str,
    limit: int = Query(RELATED_TOPICS_LIMIT, ge=1, le=50),
    catalog: Catalog = Depends(get_catalog),
):
    """Get other topics from the same course."""
    if topic_id not in catalog:
        raise HTTPException(status_code=404, detail=f"Topic not found: {topic_id}")

    return [summarize(entry) for entry in catalog.get_related_topics(topic_id, limit)]
