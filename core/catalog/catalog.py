"""Immutable catalog snapshot."""

from collections import Counter
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType

from .builder import flatten
from .navigation import (
    RELATED_TOPICS_LIMIT,
    get_course_topics,
    get_related_topics,
    navigation_at,
)
from .types import Course, CourseTree, FlatEntry, Navigation


class Catalog:
    """A course tree together with its flattened entries.

    Built once and never mutated. Rebuilding the catalog means building a
    new Catalog and swapping the reference (see core.content.store).
    """

    def __init__(self, courses: CourseTree, built_at: datetime | None = None):
        self._courses = MappingProxyType(dict(courses))
        self._entries = tuple(flatten(self._courses))
        self._index: dict[str, int] = {}
        for i, entry in enumerate(self._entries):
            # First occurrence wins, matching find_by_id
            self._index.setdefault(entry.id, i)
        self.built_at = built_at or datetime.now()

    @property
    def courses(self) -> Mapping[str, Course]:
        return self._courses

    @property
    def entries(self) -> tuple[FlatEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, topic_id: object) -> bool:
        return topic_id in self._index

    def get_course(self, course_key: str) -> Course | None:
        return self._courses.get(course_key)

    def find_by_id(self, topic_id: str) -> FlatEntry | None:
        """Get a topic entry by id, or None if it isn't in the catalog."""
        index = self._index.get(topic_id)
        if index is None:
            return None
        return self._entries[index]

    def get_navigation(self, topic_id: str) -> Navigation:
        """Get the previous/next entries around topic_id."""
        return navigation_at(self._entries, self._index.get(topic_id))

    def get_course_topics(self, course_key: str) -> list[FlatEntry]:
        return get_course_topics(self._entries, course_key)

    def get_related_topics(
        self, topic_id: str, limit: int = RELATED_TOPICS_LIMIT
    ) -> list[FlatEntry]:
        return get_related_topics(self._entries, topic_id, limit)

    def duplicate_ids(self) -> list[str]:
        """Ids that appear more than once (a source data problem)."""
        counts = Counter(entry.id for entry in self._entries)
        return [topic_id for topic_id, n in counts.items() if n > 1]


def build_catalog(courses: CourseTree) -> Catalog:
    """Build a catalog snapshot from a course tree."""
    return Catalog(courses)
