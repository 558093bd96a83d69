"""
Previous/next links and rel link tags.
"""

import logging
from typing import Any, Optional

from django.forms.utils import flatatt
from django.http import HttpRequest
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .urls import path_to_next_page, path_to_prev_page, split_url_options

logger = logging.getLogger(__name__)


def _html_attrs(attrs: dict[str, Any]) -> dict[str, Any]:
    # class_="x" -> class="x", data_page="2" -> data-page="2"
    normalized = {}
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        normalized[key.rstrip("_").replace("_", "-")] = value
    return normalized


def link_to(name: Any, href: str, **attrs: Any) -> SafeString:
    """Render an anchor; ``name`` is escaped unless already safe."""
    return format_html("<a href=\"{}\"{}>{}</a>", href, flatatt(_html_attrs(attrs)), name)


def _resolve_fallback(fallback: Any) -> Any:
    if callable(fallback):
        return fallback()
    return fallback


def link_to_previous_page(
    request: Optional[HttpRequest],
    scope: Any,
    name: Any,
    *,
    fallback: Any = None,
    **options: Any,
) -> Any:
    """
    Link to the previous page, or ``fallback`` when there is none.

    URL options (``params``, ``param_name``, ``url_name``...) build the href;
    any other keyword becomes an HTML attribute. ``rel`` defaults to ``prev``.
    """
    url_options, attrs = split_url_options(options)
    path = path_to_prev_page(request, scope, **url_options)
    if path is None:
        return _resolve_fallback(fallback)
    attrs.setdefault("rel", "prev")
    return link_to(name, path, **attrs)


def link_to_next_page(
    request: Optional[HttpRequest],
    scope: Any,
    name: Any,
    *,
    fallback: Any = None,
    **options: Any,
) -> Any:
    """Link to the next page, or ``fallback`` when there is none."""
    url_options, attrs = split_url_options(options)
    path = path_to_next_page(request, scope, **url_options)
    if path is None:
        return _resolve_fallback(fallback)
    attrs.setdefault("rel", "next")
    return link_to(name, path, **attrs)


def rel_next_prev_link_tags(request: Optional[HttpRequest], scope: Any, **options: Any) -> SafeString:
    """``<link rel="next">`` and ``<link rel="prev">`` tags for the document head."""
    url_options, _ = split_url_options(options)
    next_path = path_to_next_page(request, scope, **url_options)
    prev_path = path_to_prev_page(request, scope, **url_options)

    output = []
    if next_path:
        output.append(format_html("<link rel=\"next\" href=\"{}\">", next_path))
    if prev_path:
        output.append(format_html("<link rel=\"prev\" href=\"{}\">", prev_path))
    return mark_safe("".join(output))


__all__ = [
    "link_to",
    "link_to_next_page",
    "link_to_previous_page",
    "rel_next_prev_link_tags",
]
