"""Order tags by how many posts reference them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sized
from typing import Any

TagEntry = tuple[Any, Sized]


def sort_tags_by_count(
    tags: Iterable[TagEntry] | Mapping[Any, Sized],
) -> list[TagEntry]:
    """Sort (label, posts) entries by post count, most posts first.

    A mapping of label -> posts is sorted by its items. Entries with equal
    counts keep their input order. The input is never modified.
    """
    entries = tags.items() if isinstance(tags, Mapping) else tags
    return sorted(entries, key=lambda entry: -len(entry[1]))
