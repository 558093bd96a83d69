"""
Message lookup for the pagination helpers.

Built-in messages go through Django's ``gettext``/``ngettext`` so regular
translation catalogs apply. Projects can also override any message per
language through ``RAIL_PAGINATOR["messages"]``::

    RAIL_PAGINATOR = {
        "messages": {
            "de": {
                "page_entries_info.one_page.display_entries": {
                    "one": "Zeige <b>1</b> %(entry_name)s",
                    "other": "Zeige <b>alle %(count)s</b> %(entry_name)s",
                },
            },
        },
    }
"""

import logging
import re
from typing import Any, Callable, Optional

from django.utils.translation import get_language, gettext, ngettext, pgettext

from ..config_proxy import get_setting

logger = logging.getLogger(__name__)

# "%%" escapes stay as they are; any other "%" not opening "%(name)s" is literal.
_LITERAL_PERCENT = re.compile(r"%%|%(?!\()")


def _entry(count: int) -> str:
    return ngettext("entry", "entries", count)


def _one_page(count: int) -> str:
    if count == 0:
        return gettext("No %(entry_name)s found")
    return ngettext(
        "Displaying <b>1</b> %(entry_name)s",
        "Displaying <b>all %(count)s</b> %(entry_name)s",
        count,
    )


def _more_pages(count: int) -> str:
    return gettext(
        "Displaying %(entry_name)s <b>%(first)s&nbsp;-&nbsp;%(last)s</b> "
        "of <b>%(total)s</b> in total"
    )


DEFAULT_MESSAGES: dict[str, Callable[[int], str]] = {
    "page_entries_info.entry": _entry,
    "page_entries_info.one_page.display_entries": _one_page,
    "page_entries_info.more_pages.display_entries": _more_pages,
    "views.pagination.first": lambda count: pgettext("pagination", "&laquo; First"),
    "views.pagination.last": lambda count: pgettext("pagination", "Last &raquo;"),
    "views.pagination.previous": lambda count: pgettext("pagination", "&lsaquo; Prev"),
    "views.pagination.next": lambda count: pgettext("pagination", "Next &rsaquo;"),
    "views.pagination.truncate": lambda count: pgettext("pagination", "&hellip;"),
}


def _language_candidates(language: Optional[str]) -> list[str]:
    language = (language or get_language() or "en").lower()
    candidates = [language]
    if "-" in language:
        candidates.append(language.split("-", 1)[0])
    return candidates


def _select_plural_form(message: Any, count: Optional[int]) -> Optional[str]:
    if not isinstance(message, dict):
        return message
    if count == 0 and "zero" in message:
        return message["zero"]
    if count == 1 and "one" in message:
        return message["one"]
    return message.get("other")


def get_override(key: str, count: Optional[int] = None, language: Optional[str] = None) -> Optional[str]:
    """Return the configured override for ``key`` in the active language."""
    overrides = get_setting("messages", {}) or {}
    for candidate in _language_candidates(language):
        messages = overrides.get(candidate)
        if not messages or key not in messages:
            continue
        selected = _select_plural_form(messages[key], count)
        if selected is not None:
            return selected
    return None


def translate(key: str, count: Optional[int] = None, **params: Any) -> str:
    """
    Look up message ``key`` and interpolate ``params`` with ``%`` formatting.

    A bare ``%`` in a message (``"100% shown"``) is kept as a literal.

    Raises:
        KeyError: if ``key`` has neither an override nor a built-in message
    """
    template = get_override(key, count)
    if template is None:
        try:
            factory = DEFAULT_MESSAGES[key]
        except KeyError:
            raise KeyError(f"Unknown pagination message '{key}'") from None
        template = factory(count if count is not None else 1)
    if count is not None:
        params.setdefault("count", count)
    if not params:
        return template
    return _LITERAL_PERCENT.sub("%%", template) % params


__all__ = ["DEFAULT_MESSAGES", "get_override", "translate"]
