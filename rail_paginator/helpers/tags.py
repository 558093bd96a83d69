"""
Paginator tags: each one renders a partial template of the active theme.

Partials are looked up as ``{views_prefix}rail_paginator/{theme}/_{name}.html``
and fall back to the default theme.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from django.template import TemplateDoesNotExist
from django.template.loader import select_template
from django.utils.safestring import SafeString, mark_safe

from ..exceptions import PaginatorTemplateError
from ..utils.i18n import translate

if TYPE_CHECKING:
    from .paginator import PageProxy, Paginator

logger = logging.getLogger(__name__)

DEFAULT_THEME = "default"


def partial_template_names(name: str, theme: Optional[str] = None, views_prefix: str = "") -> list[str]:
    """Candidate template names for partial ``name``, most specific first."""
    theme = theme or DEFAULT_THEME
    views_prefix = views_prefix or ""
    candidates = [f"{views_prefix}rail_paginator/{theme}/_{name}.html"]
    if theme != DEFAULT_THEME:
        candidates.append(f"{views_prefix}rail_paginator/{DEFAULT_THEME}/_{name}.html")
    if views_prefix:
        candidates.append(f"rail_paginator/{theme}/_{name}.html")
        if theme != DEFAULT_THEME:
            candidates.append(f"rail_paginator/{DEFAULT_THEME}/_{name}.html")
    return candidates


class Tag:
    """Base class for the paginator tags."""

    template_name: str = ""
    label_key: Optional[str] = None

    def __init__(self, paginator: "Paginator"):
        self.paginator = paginator

    @property
    def url(self) -> Optional[str]:
        return None

    @property
    def label(self) -> Optional[SafeString]:
        if not self.label_key:
            return None
        return mark_safe(translate(self.label_key))

    def get_context(self) -> dict[str, Any]:
        return {
            "paginator": self.paginator,
            "current_page": self.paginator.current_page,
            "total_pages": self.paginator.total_pages,
            "per_page": self.paginator.per_page,
            "url": self.url,
            "label": self.label,
        }

    def render(self) -> SafeString:
        template = self.paginator.get_template(self.template_name)
        return mark_safe(template.render(self.get_context(), self.paginator.request))

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()


class PageTag(Tag):
    """A numbered page link."""

    template_name = "page"

    def __init__(self, paginator: "Paginator", page: "PageProxy"):
        super().__init__(paginator)
        self.page = page

    @property
    def url(self) -> str:
        return self.paginator.url_for(self.page.number)

    def get_context(self) -> dict[str, Any]:
        context = super().get_context()
        context["page"] = self.page
        return context

    def __repr__(self) -> str:
        return f"<PageTag {self.page.number}>"


class FirstPageTag(Tag):
    template_name = "first_page"
    label_key = "views.pagination.first"

    @property
    def url(self) -> str:
        return self.paginator.url_for(1)


class LastPageTag(Tag):
    template_name = "last_page"
    label_key = "views.pagination.last"

    @property
    def url(self) -> str:
        return self.paginator.url_for(self.paginator.total_pages)


class PrevPageTag(Tag):
    template_name = "prev_page"
    label_key = "views.pagination.previous"

    @property
    def url(self) -> str:
        return self.paginator.url_for(self.paginator.current_page.number - 1)


class NextPageTag(Tag):
    template_name = "next_page"
    label_key = "views.pagination.next"

    @property
    def url(self) -> str:
        return self.paginator.url_for(self.paginator.current_page.number + 1)


class GapTag(Tag):
    """The truncation marker between non-adjacent page links."""

    template_name = "gap"
    label_key = "views.pagination.truncate"

    def __repr__(self) -> str:
        return "<GapTag>"


def load_partial(name: str, theme: Optional[str], views_prefix: str):
    template_names = partial_template_names(name, theme, views_prefix)
    try:
        return select_template(template_names)
    except TemplateDoesNotExist as exc:
        raise PaginatorTemplateError(
            f"No template found for paginator partial '{name}'",
            template_names=template_names,
        ) from exc


__all__ = [
    "FirstPageTag",
    "GapTag",
    "LastPageTag",
    "NextPageTag",
    "PageTag",
    "PrevPageTag",
    "Tag",
    "load_partial",
    "partial_template_names",
]
