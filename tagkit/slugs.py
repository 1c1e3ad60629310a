"""Tag label -> slug -> /tag/ URL."""

from __future__ import annotations

import re

from tagkit.urls import relative_url

TAG_PREFIX = "/tag/"


def tag_text(tag: object) -> str:
    """Render a tag label as text; None is ""."""
    return "" if tag is None else str(tag)


def slugify_tag(tag: object) -> str:
    """Turn a tag label into a lowercase ASCII slug.

    Runs of anything outside [a-z0-9] collapse to one hyphen and edge
    hyphens are dropped, so "  C++ Tips " becomes "c-tips" and "C++"
    becomes "c". Non-text labels go through tag_text().
    """
    slug = re.sub(r"[^a-z0-9]+", "-", tag_text(tag).lower().strip())
    return slug.strip("-")


def tag_url(tag: object, baseurl: str | None = "") -> str:
    """Build the relative URL of a tag's page under the site base path."""
    return relative_url(f"{TAG_PREFIX}{slugify_tag(tag)}", baseurl)
