"""Flatten the course tree into catalog order."""

from .types import CourseTree, FlatEntry


def flatten(courses: CourseTree) -> list[FlatEntry]:
    """Flatten courses -> sections -> topics into a single ordered list.

    Order follows declaration (mapping insertion) order at every level,
    never alphabetical. Topic records are not validated; whatever the
    source holds is carried through with its ancestry attached.

    Args:
        courses: Ordered mapping of course key to Course.

    Returns:
        One FlatEntry per topic, in catalog order.
    """
    entries = []
    for course_key, course in courses.items():
        for section_key, section in course.sections.items():
            for topic in section.topics:
                entries.append(
                    FlatEntry(
                        id=topic.id,
                        title=topic.title,
                        description=topic.description,
                        course_key=course_key,
                        section_key=section_key,
                        course_title=course.title,
                        section_title=section.title,
                        payload=topic.payload,
                    )
                )
    return entries


def count_topics(courses: CourseTree) -> int:
    """Total number of topics across all courses."""
    return sum(
        len(section.topics)
        for course in courses.values()
        for section in course.sections.values()
    )
