"""Core module for rail-paginator.

Holds the page scope wrapping a paginated collection and the resolved
paginator settings.
"""

from .scope import PageScope, as_scope, paginate_request
from .settings import PaginatorSettings

__all__ = ["PageScope", "PaginatorSettings", "as_scope", "paginate_request"]
