"""Jinja2 filter registration.

Call register_filters() once while setting up the template environment:

    env = Environment(loader=FileSystemLoader("_layouts"))
    register_filters(env, baseurl="/blog")

after which templates can use

    {% for tag, posts in site.tags | sort_tags_by_count %}
      <a href="{{ tag | tag_url }}">{{ tag }} ({{ posts | length }})</a>
    {% endfor %}
"""

from __future__ import annotations

from functools import partial

from jinja2 import BaseLoader, Environment, select_autoescape

from tagkit.slugs import tag_url
from tagkit.sorting import sort_tags_by_count


def tag_filters(baseurl: str | None = "") -> dict:
    """Filter name -> callable, with tag_url bound to baseurl."""
    return {
        "tag_url": partial(tag_url, baseurl=baseurl),
        "sort_tags_by_count": sort_tags_by_count,
    }


def register_filters(env: Environment, baseurl: str | None = "") -> Environment:
    """Install the tag filters into env's filter table and return env."""
    env.filters.update(tag_filters(baseurl))
    return env


def create_environment(
    baseurl: str | None = "",
    loader: BaseLoader | None = None,
) -> Environment:
    """Build an HTML-autoescaping Environment with the tag filters registered."""
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "htm", "xml"]),
    )
    return register_filters(env, baseurl=baseurl)
