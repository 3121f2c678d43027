"""Course catalog index: flattening, lookup and navigation."""

from .builder import flatten, count_topics
from .catalog import Catalog, build_catalog
from .navigation import get_navigation, get_course_topics, get_related_topics
from .resolver import find_by_id
from .types import (
    Topic,
    Section,
    Course,
    CourseTree,
    FlatEntry,
    Navigation,
)

__all__ = [
    "flatten",
    "count_topics",
    "Catalog",
    "build_catalog",
    "get_navigation",
    "get_course_topics",
    "get_related_topics",
    "find_by_id",
    "Topic",
    "Section",
    "Course",
    "CourseTree",
    "FlatEntry",
    "Navigation",
]
