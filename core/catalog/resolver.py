"""Resolve topics by id within the flattened catalog."""

from collections.abc import Sequence

from .types import FlatEntry


def find_index(entries: Sequence[FlatEntry], topic_id: str) -> int | None:
    """Index of the first entry with this id, or None."""
    for i, entry in enumerate(entries):
        if entry.id == topic_id:
            return i
    return None


def find_by_id(entries: Sequence[FlatEntry], topic_id: str) -> FlatEntry | None:
    """Get the first entry whose id matches.

    Unknown ids (stale bookmarks, removed lessons) are an expected case,
    so absence is returned as None rather than raised.
    """
    index = find_index(entries, topic_id)
    if index is None:
        return None
    return entries[index]
