"""Course API routes."""

from fastapi import APIRouter, Depends, HTTPException

from core.catalog import Catalog
from web_api.dependencies import get_catalog
from web_api.schemas import TopicSummary, serialize_course_outline, summarize

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("")
async def list_courses(catalog: Catalog = Depends(get_catalog)):
    """Get every course with its sections and topics, in catalog order."""
    return {
        "courses": [
            serialize_course_outline(course) for course in catalog.courses.values()
        ],
        "totalTopics": len(catalog),
    }


@router.get("/{course_key}")
async def get_course(course_key: str, catalog: Catalog = Depends(get_catalog)):
    """Get one course outline."""
    course = catalog.get_course(course_key)
    if course is None:
        raise HTTPException(status_code=404, detail=f"Course not found: {course_key}")

    return serialize_course_outline(course)


@router.get("/{course_key}/topics", response_model=list[TopicSummary])
async def get_course_topics(course_key: str, catalog: Catalog = Depends(get_catalog)):
    """Get the flattened topics of one course."""
    if catalog.get_course(course_key) is None:
        raise HTTPException(status_code=404, detail=f"Course not found: {course_key}")

    return [summarize(entry) for entry in catalog.get_course_topics(course_key)]
