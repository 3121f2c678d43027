"""Response models and serializers for catalog endpoints."""

from pydantic import BaseModel

from core.catalog import Course, FlatEntry, Navigation


class TopicSummary(BaseModel):
    """A topic without its lesson payload."""

    id: str
    title: str
    description: str
    courseKey: str
    sectionKey: str
    courseTitle: str
    sectionTitle: str


class NavigationResponse(BaseModel):
    """Previous/next topics in catalog order."""

    prev: TopicSummary | None = None
    next: TopicSummary | None = None


class RefreshResponse(BaseModel):
    status: str
    message: str
    topics: int


def summarize(entry: FlatEntry) -> TopicSummary:
    return TopicSummary(
        id=entry.id,
        title=entry.title,
        description=entry.description,
        courseKey=entry.course_key,
        sectionKey=entry.section_key,
        courseTitle=entry.course_title,
        sectionTitle=entry.section_title,
    )


def serialize_navigation(navigation: Navigation) -> NavigationResponse:
    return NavigationResponse(
        prev=summarize(navigation.prev) if navigation.prev else None,
        next=summarize(navigation.next) if navigation.next else None,
    )


def serialize_topic(entry: FlatEntry, navigation: Navigation) -> dict:
    """Full topic for the tutorial page.

    Payload fields are merged in first so that ancestry always reflects
    the topic's position in the tree.
    """
    return {
        **entry.payload,
        **summarize(entry).model_dump(),
        "navigation": serialize_navigation(navigation).model_dump(),
    }


def serialize_course_outline(course: Course) -> dict:
    """Course with its sections and topic titles, in declaration order."""
    return {
        "key": course.key,
        "title": course.title,
        "icon": course.icon,
        "color": course.color,
        "sections": [
            {
                "key": section.key,
                "title": section.title,
                "topics": [
                    {
                        "id": topic.id,
                        "title": topic.title,
                        "description": topic.description,
                    }
                    for topic in section.topics
                ],
            }
            for section in course.sections.values()
        ],
    }
