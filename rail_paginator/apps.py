"""
Django app configuration for the rail-paginator library.

This module configures:
- Django application registration (templates and template tags)
- Library settings validation
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for rail-paginator."""

    name = "rail_paginator"
    verbose_name = "Rail Paginator"
    label = "rail_paginator"

    def ready(self):
        """Validate the library configuration once Django has loaded."""
        logger.debug("Initializing rail-paginator")
        self._validate_configuration()

    def _validate_configuration(self):
        """Validate RAIL_PAGINATOR against the library defaults."""
        from .config_proxy import settings_proxy
        from .defaults import validate_settings
        from .exceptions import PaginatorConfigurationError

        errors = validate_settings(settings_proxy.as_dict())
        if not errors:
            logger.debug("rail-paginator configuration validated")
            return

        message = "Invalid RAIL_PAGINATOR settings: " + "; ".join(errors)
        if self._is_debug_mode():
            raise PaginatorConfigurationError(message, errors)
        logger.error(message)

    def _is_debug_mode(self):
        """Check if we're in debug mode."""
        from django.conf import settings as django_settings

        return getattr(django_settings, "DEBUG", False)
