"""Course content loading and catalog snapshots."""

from .loader import load_course_tree
from .parser import ContentFormatError, parse_course, parse_course_tree
from .store import CatalogNotLoadedError, CatalogStore

__all__ = [
    "load_course_tree",
    "ContentFormatError",
    "parse_course",
    "parse_course_tree",
    "CatalogNotLoadedError",
    "CatalogStore",
]
