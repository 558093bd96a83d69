"""
Page scope: a collection of records decorated with page metadata.

The arithmetic (record counts, page counts) is delegated to
``django.core.paginator.Paginator``. ``PageScope`` only adds what the view
helpers need on top of it: out-of-range pages that do not raise, a
``max_pages`` cap, and entry names for the entries info string.
"""

import logging
from functools import cached_property
from typing import Any, Iterator, Optional

from django.core.paginator import Page
from django.core.paginator import Paginator as DjangoPaginator
from django.http import HttpRequest

from ..config_proxy import get_setting
from ..utils.coercion import coerce_int, coerce_page_number
from ..utils.i18n import translate
from .settings import PaginatorSettings

logger = logging.getLogger(__name__)

SCOPE_ATTRIBUTES = ("current_page", "total_pages", "limit_value", "next_page", "prev_page")
ENTRIES_ATTRIBUTES = SCOPE_ATTRIBUTES + ("records", "offset_value", "total_count", "entry_name")


class PageScope:
    """One page of a queryset or sequence with page-navigation accessors."""

    def __init__(
        self,
        object_list: Any,
        page: Any = 1,
        per_page: Any = None,
        *,
        max_pages: Optional[int] = None,
        max_per_page: Optional[int] = None,
        model: Any = None,
    ):
        self.object_list = object_list
        self.model = model if model is not None else getattr(object_list, "model", None)
        config = PaginatorSettings.from_settings(self.model)

        self.current_page = coerce_page_number(page)

        limit = coerce_int(per_page, default=None)
        if limit is None or limit <= 0:
            limit = config.default_per_page
        if max_per_page is None:
            max_per_page = config.max_per_page
        if max_per_page:
            limit = min(limit, max_per_page)
        self.limit_value = limit

        self.max_pages = max_pages if max_pages is not None else config.max_pages
        self.paginator = DjangoPaginator(
            object_list, self.limit_value, allow_empty_first_page=False
        )

    @classmethod
    def from_page(cls, page: Page, **kwargs: Any) -> "PageScope":
        """Build a scope from a ``django.core.paginator.Page``."""
        return cls(
            page.paginator.object_list,
            page.number,
            page.paginator.per_page,
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"<PageScope {self.current_page} of {self.total_pages}>"

    def __iter__(self) -> Iterator[Any]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def offset_value(self) -> int:
        return (self.current_page - 1) * self.limit_value

    @cached_property
    def total_count(self) -> int:
        return self.paginator.count

    @cached_property
    def total_pages(self) -> int:
        pages = self.paginator.num_pages
        if self.max_pages and self.max_pages < pages:
            return self.max_pages
        return pages

    @cached_property
    def records(self) -> list:
        offset = self.offset_value
        if self.is_out_of_range or offset >= self.total_count:
            return []
        stop = min(offset + self.limit_value, self.total_count)
        return list(self.object_list[offset:stop])

    @property
    def is_first_page(self) -> bool:
        return self.current_page == 1

    @property
    def is_last_page(self) -> bool:
        return self.current_page == self.total_pages

    @property
    def is_out_of_range(self) -> bool:
        return self.current_page > self.total_pages

    @property
    def next_page(self) -> Optional[int]:
        if self.is_last_page or self.is_out_of_range:
            return None
        return self.current_page + 1

    @property
    def prev_page(self) -> Optional[int]:
        if self.is_first_page or self.is_out_of_range:
            return None
        return self.current_page - 1

    def entry_name(self, count: int = 1) -> str:
        """Human name for ``count`` records of this collection."""
        meta = getattr(self.model, "_meta", None)
        if meta is not None:
            name = meta.verbose_name if count == 1 else meta.verbose_name_plural
            return str(name).lower()
        return translate("page_entries_info.entry", count=count)


def as_scope(value: Any, attributes: tuple = SCOPE_ATTRIBUTES) -> Any:
    """
    Coerce ``value`` into something the view helpers can read.

    Accepts a ``PageScope``, a Django ``Page`` or any object exposing
    ``attributes``. Helpers that read more than page navigation pass the
    attributes they need.
    """
    if isinstance(value, PageScope):
        return value
    if isinstance(value, Page):
        return PageScope.from_page(value)
    missing = [attr for attr in attributes if not hasattr(value, attr)]
    if not missing:
        return value
    raise TypeError(
        f"{type(value).__name__} is not a paginated collection "
        f"(missing {', '.join(missing)}); "
        "use PageScope or django.core.paginator.Page"
    )


def paginate_request(
    request: HttpRequest,
    object_list: Any,
    per_page: Any = None,
    *,
    param_name: Optional[str] = None,
    **kwargs: Any,
) -> PageScope:
    """Paginate ``object_list`` at the page requested in the query string."""
    param_name = param_name or get_setting("param_name", "page")
    page = request.GET.get(param_name, 1)
    logger.debug("Paginating request %s at %s=%r", request.path, param_name, page)
    return PageScope(object_list, page, per_page, **kwargs)


__all__ = ["ENTRIES_ATTRIBUTES", "SCOPE_ATTRIBUTES", "PageScope", "as_scope", "paginate_request"]
