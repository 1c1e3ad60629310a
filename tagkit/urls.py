"""Resolve site paths against the configured base path."""

from __future__ import annotations

from urllib.parse import quote, urlsplit

# Characters that already carry URL meaning and must not be escaped
_SAFE = "/#?&=%:@!$'()*+,;~"


def relative_url(path: str | None, baseurl: str | None = "") -> str | None:
    """Prefix path with the site's base path.

    URLs with a scheme (https://..., mailto:...) are returned unchanged.

    >>> relative_url("/tag/python", "/blog/")
    '/blog/tag/python'
    """
    if path is None:
        return None
    if urlsplit(path).scheme:
        return path
    return quote(f"{_normalize_baseurl(baseurl)}{_ensure_leading_slash(path)}", safe=_SAFE)


def _ensure_leading_slash(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def _normalize_baseurl(baseurl: str | None) -> str:
    """Leading slash, no trailing slash; "" when there is no base path."""
    if not baseurl:
        return ""
    stripped = baseurl.strip().strip("/")
    return f"/{stripped}" if stripped else ""
