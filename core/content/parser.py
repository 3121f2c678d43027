"""Parse the course structure mapping into typed catalog objects.

Expected shape (the same one the tutorial frontend uses):

    {
        "corejava": {
            "title": "Core Java",
            "icon": "...",
            "color": "#f89820",
            "sections": {
                "basics": {
                    "title": "Java Basics",
                    "topics": [{"id": "java-introduction", "title": ..., ...}],
                },
            },
        },
    }

Only structural position is checked. Topic payloads (content, code,
practice questions) are passed through untouched.
"""

from core.catalog.types import Course, Section, Topic

# Topic fields lifted out of the payload
TOPIC_FIELDS = ("id", "title", "description")


class ContentFormatError(Exception):
    """Raised when the course structure doesn't have the expected shape."""

    pass


def _parse_topic(data: object, location: str) -> Topic:
    """Parse a topic record into a Topic dataclass."""
    if not isinstance(data, dict):
        raise ContentFormatError(
            f"{location}: topic must be an object, got {type(data).__name__}"
        )

    topic_id = data.get("id")
    if not isinstance(topic_id, str) or not topic_id:
        raise ContentFormatError(f"{location}: topic is missing a string 'id'")

    payload = {k: v for k, v in data.items() if k not in TOPIC_FIELDS}
    return Topic(
        id=topic_id,
        title=str(data.get("title", "")),
        description=str(data.get("description", "")),
        payload=payload,
    )


def _parse_section(section_key: str, data: object, course_key: str) -> Section:
    """Parse a section mapping and its ordered topic list."""
    location = f"{course_key}.{section_key}"
    if not isinstance(data, dict):
        raise ContentFormatError(f"{location}: section must be an object")

    topics_raw = data.get("topics", [])
    if not isinstance(topics_raw, list):
        raise ContentFormatError(
            f"{location}: 'topics' must be a list, got {type(topics_raw).__name__}"
        )

    topics = tuple(
        _parse_topic(t, f"{location}.topics[{i}]") for i, t in enumerate(topics_raw)
    )
    return Section(
        key=section_key,
        title=str(data.get("title", section_key)),
        topics=topics,
    )


def parse_course(course_key: str, data: object) -> Course:
    """Parse one course mapping."""
    if not isinstance(data, dict):
        raise ContentFormatError(f"{course_key}: course must be an object")

    sections_raw = data.get("sections")
    if sections_raw is None:
        raise ContentFormatError(f"{course_key}: missing required key 'sections'")
    if not isinstance(sections_raw, dict):
        raise ContentFormatError(
            f"{course_key}: 'sections' must be an object, "
            f"got {type(sections_raw).__name__}"
        )

    sections = {
        section_key: _parse_section(section_key, section, course_key)
        for section_key, section in sections_raw.items()
    }
    return Course(
        key=course_key,
        title=str(data.get("title", course_key)),
        sections=sections,
        icon=data.get("icon"),
        color=data.get("color"),
    )


def parse_course_tree(raw: object) -> dict[str, Course]:
    """Parse the whole course structure, keeping declaration order.

    Raises:
        ContentFormatError: If the structure is not a mapping of courses.
    """
    if not isinstance(raw, dict):
        raise ContentFormatError(
            f"Course structure must be an object, got {type(raw).__name__}"
        )

    return {key: parse_course(key, data) for key, data in raw.items()}
