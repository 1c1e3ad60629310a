"""Tag index: group posts by tag and flatten into records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sized
from typing import Any

from tagkit.slugs import slugify_tag, tag_text, tag_url
from tagkit.sorting import sort_tags_by_count


def build_tag_index(posts: Iterable[Mapping[str, Any]]) -> dict[str, list]:
    """Group posts under each label in their "tags" list.

    Labels appear in the order they are first seen. A post is listed once
    per label even if it repeats the label; posts with no tags are skipped.
    """
    index: dict[str, list] = {}
    for post in posts:
        labels = post.get("tags") or []
        if isinstance(labels, str):
            labels = [labels]
        for label in dict.fromkeys(labels):
            index.setdefault(label, []).append(post)
    return index


def tag_records(
    tags: Iterable[tuple[Any, Sized]] | Mapping[Any, Sized],
    baseurl: str | None = "",
    limit: int | None = None,
) -> list[dict]:
    """Sort tags by post count and describe each as a JSON-ready record."""
    ranked = sort_tags_by_count(tags)
    if limit is not None:
        ranked = ranked[:limit]

    return [
        {
            "tag": tag_text(label),
            "slug": slugify_tag(label),
            "url": tag_url(label, baseurl),
            "count": len(posts),
        }
        for label, posts in ranked
    ]
