"""
Utility helpers for rail-paginator.
"""

from .i18n import translate
from .inflection import pluralize, register_inflections

__all__ = ["pluralize", "register_inflections", "translate"]
