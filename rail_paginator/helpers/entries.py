"""
Entries info: "Displaying users 1 - 25 of 50 in total".
"""

from typing import Any, Optional

from django.utils.html import conditional_escape
from django.utils.safestring import SafeString, mark_safe

from ..core.scope import ENTRIES_ATTRIBUTES, as_scope
from ..utils.i18n import translate
from ..utils.inflection import pluralize


def page_entries_info(scope: Any, entry_name: Optional[str] = None) -> SafeString:
    """
    Describe the records shown on the current page.

    ``entry_name`` overrides the collection's own name and is pluralized in
    the active language for the number of records on the page.
    """
    scope = as_scope(scope, ENTRIES_ATTRIBUTES)
    page_size = len(scope.records)

    if entry_name:
        name = pluralize(str(entry_name), page_size)
    else:
        name = scope.entry_name(page_size).lower()
    name = conditional_escape(name)

    if scope.total_pages < 2:
        message = translate(
            "page_entries_info.one_page.display_entries",
            count=scope.total_count,
            entry_name=name,
        )
    else:
        first = scope.offset_value + 1
        last = scope.offset_value + page_size
        message = translate(
            "page_entries_info.more_pages.display_entries",
            count=scope.total_count,
            entry_name=name,
            first=first,
            last=last,
            total=scope.total_count,
        )
    return mark_safe(message)


__all__ = ["page_entries_info"]
