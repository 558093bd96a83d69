"""
Default configuration for the rail-paginator library.

Every setting the view helpers consume is declared here. Projects override
them through the ``RAIL_PAGINATOR`` Django setting, and per model through
``RAIL_PAGINATOR_MODELS``.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "rail-paginator"


# --------------------------------------------------------------------------- #
# Library-wide defaults
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    # Collection sizing
    "default_per_page": 25,
    "max_per_page": None,
    "max_pages": None,
    # Page window
    "window": 4,
    "outer_window": 0,
    "left": 0,
    "right": 0,
    # URLs
    "param_name": "page",
    "params_on_first_page": False,
    # Templates
    "theme": "default",
    "views_prefix": "",
    # Message overrides, keyed by language code then message key
    "messages": {},
    # Plural rules, keyed by language code
    "inflections": {},
}

# Keys that may be overridden per model in RAIL_PAGINATOR_MODELS.
MODEL_SETTING_KEYS = ("default_per_page", "max_per_page", "max_pages")

THEMES = ("default", "bootstrap")

TEMPLATE_NAMES = (
    "paginator",
    "page",
    "gap",
    "first_page",
    "prev_page",
    "next_page",
    "last_page",
)


# --------------------------------------------------------------------------- #
# Helper functions
# --------------------------------------------------------------------------- #
def merge_settings(*settings_dicts: dict[str, Any]) -> dict[str, Any]:
    """
    Merge multiple settings dictionaries with deep merging for nested dicts.
    Later dictionaries override earlier ones.
    """
    result: dict[str, Any] = {}
    for settings_dict in settings_dicts:
        for key, value in settings_dict.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = merge_settings(result[key], value)
            else:
                result[key] = value
    return result


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_non_negative_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_settings(settings: dict[str, Any]) -> list[str]:
    """
    Validate a settings dictionary and return a list of validation errors.
    """
    errors: list[str] = []

    default_per_page = settings.get("default_per_page")
    max_per_page = settings.get("max_per_page")
    max_pages = settings.get("max_pages")

    if not _is_positive_int(default_per_page):
        errors.append("default_per_page must be a positive integer")
    if max_per_page is not None and not _is_positive_int(max_per_page):
        errors.append("max_per_page must be a positive integer or None")
    if max_pages is not None and not _is_positive_int(max_pages):
        errors.append("max_pages must be a positive integer or None")
    if (
        _is_positive_int(default_per_page)
        and _is_positive_int(max_per_page)
        and default_per_page > max_per_page
    ):
        errors.append("default_per_page cannot be greater than max_per_page")

    for key in ("window", "outer_window", "left", "right"):
        if not _is_non_negative_int(settings.get(key)):
            errors.append(f"{key} must be a non-negative integer")

    param_name = settings.get("param_name")
    if not isinstance(param_name, str) or not param_name:
        errors.append("param_name must be a non-empty string")

    for key in ("messages", "inflections"):
        if not isinstance(settings.get(key, {}), dict):
            errors.append(f"{key} must be a dictionary keyed by language code")

    return errors
