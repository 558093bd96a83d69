"""
Page URL construction.

Paths come from Django's URL resolver (``url_name``) or the current request
path; the query string is the request's ``GET`` merged with ``params`` and the
page parameter.
"""

import logging
from functools import cached_property
from typing import Any, Mapping, Optional, Sequence

from django.http import HttpRequest, QueryDict
from django.urls import reverse

from ..config_proxy import get_setting
from ..core.scope import as_scope
from ..utils.coercion import coerce_bool

logger = logging.getLogger(__name__)

URL_OPTION_KEYS = (
    "url_name",
    "url_args",
    "url_kwargs",
    "params",
    "param_name",
    "params_on_first_page",
)


def split_url_options(options: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split keyword options into URL builder options and everything else."""
    url_options = {k: v for k, v in options.items() if k in URL_OPTION_KEYS}
    rest = {k: v for k, v in options.items() if k not in URL_OPTION_KEYS}
    return url_options, rest


class PageUrlBuilder:
    """Build the URL of any page for the current request."""

    def __init__(
        self,
        request: Optional[HttpRequest] = None,
        *,
        url_name: Optional[str] = None,
        url_args: Optional[Sequence[Any]] = None,
        url_kwargs: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        param_name: Optional[str] = None,
        params_on_first_page: Optional[bool] = None,
    ):
        if request is None and not url_name:
            raise ValueError("A request or a url_name is required to build page URLs")
        self.request = request
        self.url_name = url_name
        self.url_args = list(url_args or [])
        self.url_kwargs = dict(url_kwargs or {})
        self.params = dict(params or {})
        self.param_name = param_name or get_setting("param_name", "page")
        if params_on_first_page is None:
            params_on_first_page = get_setting("params_on_first_page", False)
        self.params_on_first_page = coerce_bool(params_on_first_page)

    @cached_property
    def base_path(self) -> str:
        if self.url_name:
            return reverse(self.url_name, args=self.url_args, kwargs=self.url_kwargs)
        return self.request.path

    def query_for(self, page: Optional[int]) -> QueryDict:
        if self.request is not None:
            query = self.request.GET.copy()
        else:
            query = QueryDict(mutable=True)

        for key, value in self.params.items():
            if value is None:
                query.pop(key, None)
            elif isinstance(value, (list, tuple)):
                query.setlist(key, [str(item) for item in value])
            else:
                query[key] = str(value)

        if page is None or (page <= 1 and not self.params_on_first_page):
            query.pop(self.param_name, None)
        else:
            query[self.param_name] = str(page)
        return query

    def page_url_for(self, page: Optional[int]) -> str:
        """Return the path (with query string) of ``page``."""
        query = self.query_for(page).urlencode()
        url = f"{self.base_path}?{query}" if query else self.base_path
        logger.debug("Built page URL %s for page %s", url, page)
        return url

    def absolute_url_for(self, page: Optional[int]) -> str:
        """Return the absolute URL of ``page`` (a path when there is no request)."""
        path = self.page_url_for(page)
        if self.request is None:
            return path
        return self.request.build_absolute_uri(path)


def path_to_next_page(request: Optional[HttpRequest], scope: Any, **options: Any) -> Optional[str]:
    """Path of the next page, or ``None`` on the last page or out of range."""
    page = as_scope(scope).next_page
    if page is None:
        return None
    return PageUrlBuilder(request, **options).page_url_for(page)


def path_to_prev_page(request: Optional[HttpRequest], scope: Any, **options: Any) -> Optional[str]:
    """Path of the previous page, or ``None`` on the first page or out of range."""
    page = as_scope(scope).prev_page
    if page is None:
        return None
    return PageUrlBuilder(request, **options).page_url_for(page)


def next_page_url(request: HttpRequest, scope: Any, **options: Any) -> Optional[str]:
    page = as_scope(scope).next_page
    if page is None:
        return None
    return PageUrlBuilder(request, **options).absolute_url_for(page)


def prev_page_url(request: HttpRequest, scope: Any, **options: Any) -> Optional[str]:
    page = as_scope(scope).prev_page
    if page is None:
        return None
    return PageUrlBuilder(request, **options).absolute_url_for(page)


__all__ = [
    "PageUrlBuilder",
    "URL_OPTION_KEYS",
    "next_page_url",
    "path_to_next_page",
    "path_to_prev_page",
    "prev_page_url",
    "split_url_options",
]
