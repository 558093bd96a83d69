"""
View helpers for paginated collections.
"""

from .entries import page_entries_info
from .links import (
    link_to,
    link_to_next_page,
    link_to_previous_page,
    rel_next_prev_link_tags,
)
from .paginator import PageProxy, Paginator, paginate
from .urls import (
    PageUrlBuilder,
    next_page_url,
    path_to_next_page,
    path_to_prev_page,
    prev_page_url,
)

__all__ = [
    "PageProxy",
    "PageUrlBuilder",
    "Paginator",
    "link_to",
    "link_to_next_page",
    "link_to_previous_page",
    "next_page_url",
    "page_entries_info",
    "paginate",
    "path_to_next_page",
    "path_to_prev_page",
    "prev_page_url",
    "rel_next_prev_link_tags",
]
