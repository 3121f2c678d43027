"""
Type definitions for the course catalog.

The course tree is Course -> Section -> Topic. Flattening it yields
FlatEntry records, which carry the owning course/section alongside the
topic's own fields.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Topic:
    """A single lesson record."""

    id: str
    title: str
    description: str = ""
    # Everything else from the source record (content, code, practice
    # questions). Never inspected by the catalog.
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))


@dataclass(frozen=True)
class Section:
    """An ordered group of topics within a course."""

    key: str
    title: str
    topics: tuple[Topic, ...] = ()


@dataclass(frozen=True)
class Course:
    """An ordered group of sections."""

    key: str
    title: str
    sections: Mapping[str, Section] = field(default_factory=dict)
    icon: str | None = None  # Display metadata only
    color: str | None = None

    def __post_init__(self):
        # Keep declaration order but refuse mutation after load
        object.__setattr__(self, "sections", MappingProxyType(dict(self.sections)))


@dataclass(frozen=True)
class FlatEntry:
    """A topic with its resolved course/section ancestry."""

    id: str
    title: str
    description: str
    course_key: str
    section_key: str
    course_title: str
    section_title: str
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))


@dataclass(frozen=True)
class Navigation:
    """Neighbours of a topic in catalog order."""

    prev: FlatEntry | None = None
    next: FlatEntry | None = None


CourseTree = Mapping[str, Course]
