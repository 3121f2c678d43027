"""Sequential navigation across the flattened catalog."""

from collections.abc import Sequence

from .resolver import find_index
from .types import FlatEntry, Navigation

RELATED_TOPICS_LIMIT = 5


def navigation_at(entries: Sequence[FlatEntry], index: int | None) -> Navigation:
    """Build the prev/next pair around a known index."""
    if index is None:
        return Navigation()

    prev_entry = entries[index - 1] if index > 0 else None
    next_entry = entries[index + 1] if index < len(entries) - 1 else None
    return Navigation(prev=prev_entry, next=next_entry)


def get_navigation(entries: Sequence[FlatEntry], topic_id: str) -> Navigation:
    """Get the topics immediately before and after topic_id.

    Navigation runs over the flattened sequence, so the topic after the
    last one in a section is the first topic of the following section
    (or course).

    Returns:
        Navigation with prev/next set, or None at the catalog boundaries.
        An unknown topic_id gives Navigation(None, None) so a broken link
        just shows no navigation.
    """
    return navigation_at(entries, find_index(entries, topic_id))


def get_course_topics(entries: Sequence[FlatEntry], course_key: str) -> list[FlatEntry]:
    """Get all entries belonging to one course, in catalog order."""
    return [entry for entry in entries if entry.course_key == course_key]


def get_related_topics(
    entries: Sequence[FlatEntry],
    topic_id: str,
    limit: int = RELATED_TOPICS_LIMIT,
) -> list[FlatEntry]:
    """Get other topics from the same course as topic_id.

    Args:
        entries: Flattened catalog.
        topic_id: The topic currently being viewed.
        limit: Maximum number of topics to return.

    Returns:
        Up to `limit` entries in catalog order, excluding the topic itself.
        Empty when topic_id is unknown.
    """
    index = find_index(entries, topic_id)
    if index is None or limit <= 0:
        return []

    course_key = entries[index].course_key
    related = [
        entry
        for entry in entries
        if entry.course_key == course_key and entry.id != topic_id
    ]
    return related[:limit]
