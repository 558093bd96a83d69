"""
Custom exceptions for the pagination helpers.
"""

from typing import List, Optional

from django.core.exceptions import ImproperlyConfigured


class PaginatorError(Exception):
    """Base exception for rail-paginator errors."""


class PaginatorConfigurationError(PaginatorError, ImproperlyConfigured):
    """Raised when the RAIL_PAGINATOR settings are invalid."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = list(errors or [])
        super().__init__(message)


class PaginatorTemplateError(PaginatorError):
    """Raised when no partial template can be found for a paginator tag."""

    def __init__(self, message: str, template_names: Optional[List[str]] = None):
        self.template_names = list(template_names or [])
        super().__init__(message)
