"""
Windowed page links.

Given the current page and the page count, the paginator decides which page
numbers get a link and where the gaps go, then renders the theme's
``_paginator.html`` partial.
"""

import logging
from typing import Any, Optional, Union

from django.http import HttpRequest
from django.utils.safestring import SafeString, mark_safe

from ..core.scope import as_scope
from ..core.settings import PaginatorSettings
from .tags import (
    FirstPageTag,
    GapTag,
    LastPageTag,
    NextPageTag,
    PageTag,
    PrevPageTag,
    load_partial,
)
from .urls import PageUrlBuilder, split_url_options

logger = logging.getLogger(__name__)


class PageProxy:
    """A page number seen from the paginator's window."""

    def __init__(self, paginator: "Paginator", number: int, last: Optional[Union[PageTag, GapTag]] = None):
        self.paginator = paginator
        self.number = number
        self.last = last

    def __int__(self) -> int:
        return self.number

    def __str__(self) -> str:
        return str(self.number)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, PageProxy):
            return self.number == other.number
        return self.number == other

    def __hash__(self) -> int:
        return hash(self.number)

    def __repr__(self) -> str:
        return f"<PageProxy {self.number}>"

    @property
    def is_current(self) -> bool:
        return self.number == self.paginator.current_page_number

    @property
    def is_first(self) -> bool:
        return self.number == 1

    @property
    def is_last(self) -> bool:
        return self.number == self.paginator.total_pages

    @property
    def is_prev(self) -> bool:
        return self.number == self.paginator.current_page_number - 1

    @property
    def is_next(self) -> bool:
        return self.number == self.paginator.current_page_number + 1

    @property
    def rel(self) -> Optional[str]:
        if self.is_next:
            return "next"
        if self.is_prev:
            return "prev"
        return None

    @property
    def is_left_outer(self) -> bool:
        return self.number <= self.paginator.left

    @property
    def is_right_outer(self) -> bool:
        return self.paginator.total_pages - self.number < self.paginator.right

    @property
    def is_inside_window(self) -> bool:
        return abs(self.paginator.current_page_number - self.number) <= self.paginator.window

    @property
    def is_single_gap(self) -> bool:
        # A gap of exactly one page is shown as that page instead.
        current = self.paginator.current_page_number
        window = self.paginator.window
        return (
            self.number == current - window - 1 and self.number == self.paginator.left + 1
        ) or (
            self.number == current + window + 1
            and self.number == self.paginator.total_pages - self.paginator.right
        )

    @property
    def is_out_of_range(self) -> bool:
        return self.number > self.paginator.total_pages

    @property
    def was_truncated(self) -> bool:
        return isinstance(self.last, GapTag)

    @property
    def display_tag(self) -> bool:
        return (
            self.is_left_outer
            or self.is_right_outer
            or self.is_inside_window
            or self.is_single_gap
        )


class Paginator:
    """Render the page links of one paginated collection."""

    def __init__(
        self,
        request: Optional[HttpRequest],
        *,
        current_page: int,
        total_pages: int,
        per_page: Optional[int] = None,
        window: Optional[int] = None,
        inner_window: Optional[int] = None,
        outer_window: Optional[int] = None,
        left: Optional[int] = None,
        right: Optional[int] = None,
        theme: Optional[str] = None,
        views_prefix: Optional[str] = None,
        **url_options: Any,
    ):
        config = PaginatorSettings.from_settings()
        url_options, unknown = split_url_options(url_options)
        if unknown:
            raise TypeError(
                f"Unexpected paginator options: {', '.join(sorted(unknown))}"
            )

        self.request = request
        self.current_page_number = int(current_page)
        self.total_pages = int(total_pages)
        self.per_page = per_page

        if window is None:
            window = inner_window if inner_window is not None else config.window
        if outer_window is None:
            outer_window = config.outer_window
        left = config.left if left is None else left
        right = config.right if right is None else right
        self.window = window
        self.left = outer_window if left == 0 else left
        self.right = outer_window if right == 0 else right

        self.theme = theme or config.theme
        self.views_prefix = config.views_prefix if views_prefix is None else views_prefix
        self.url_builder = PageUrlBuilder(request, **url_options)
        self._templates: dict[str, Any] = {}

    @property
    def current_page(self) -> PageProxy:
        return PageProxy(self, self.current_page_number)

    def url_for(self, page: int) -> str:
        return self.url_builder.page_url_for(page)

    def get_template(self, name: str):
        if name not in self._templates:
            self._templates[name] = load_partial(name, self.theme, self.views_prefix)
        return self._templates[name]

    def relevant_pages(self) -> list[int]:
        """Page numbers worth considering: both outer windows and the inner one, each plus one."""
        total = self.total_pages
        current = self.current_page_number
        left_window_plus_one = set(range(1, self.left + 2))
        right_window_plus_one = set(range(total - self.right, total + 1))
        inside_window_plus_each_sides = set(
            range(current - self.window - 1, current + self.window + 2)
        )
        pages = left_window_plus_one | inside_window_plus_each_sides | right_window_plus_one
        return sorted(page for page in pages if 1 <= page <= total)

    def page_tags(self) -> list[Union[PageTag, GapTag]]:
        """Page links and gaps, in display order."""
        tags: list[Union[PageTag, GapTag]] = []
        last: Optional[Union[PageTag, GapTag]] = None
        for number in self.relevant_pages():
            page = PageProxy(self, number, last)
            if page.display_tag:
                last = PageTag(self, page)
                tags.append(last)
            elif not page.was_truncated:
                last = GapTag(self)
                tags.append(last)
        return tags

    def first_page_tag(self) -> FirstPageTag:
        return FirstPageTag(self)

    def prev_page_tag(self) -> PrevPageTag:
        return PrevPageTag(self)

    def next_page_tag(self) -> NextPageTag:
        return NextPageTag(self)

    def last_page_tag(self) -> LastPageTag:
        return LastPageTag(self)

    def get_context(self) -> dict[str, Any]:
        current = self.current_page
        return {
            "paginator": self,
            "current_page": current,
            "total_pages": self.total_pages,
            "per_page": self.per_page,
            "page_tags": self.page_tags(),
            "show_first_and_prev": not current.is_first,
            "show_next_and_last": not (current.is_out_of_range or current.is_last),
        }

    def render(self) -> SafeString:
        if self.total_pages <= 1:
            logger.debug("Skipping pagination render for %s page(s)", self.total_pages)
            return mark_safe("")
        template = self.get_template("paginator")
        return mark_safe(template.render(self.get_context(), self.request))

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()


def paginate(
    request: Optional[HttpRequest],
    scope: Any,
    *,
    paginator_class: Optional[type] = None,
    total_pages: Optional[int] = None,
    **options: Any,
) -> SafeString:
    """
    Render the page links for ``scope``.

    ``total_pages`` overrides the collection's page count. Any other option
    is passed to ``paginator_class`` (window sizes, theme, views_prefix, URL
    options).
    """
    scope = as_scope(scope)
    options.setdefault("current_page", scope.current_page)
    options.setdefault("per_page", scope.limit_value)
    if total_pages is None:
        total_pages = scope.total_pages
    paginator = (paginator_class or Paginator)(request, total_pages=total_pages, **options)
    return mark_safe(str(paginator))


__all__ = ["PageProxy", "Paginator", "paginate"]
