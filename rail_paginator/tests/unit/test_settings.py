"""
Unit tests for paginator settings resolution and validation.
"""

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from rail_paginator.apps import AppConfig
from rail_paginator.config_proxy import (
    SettingsProxy,
    clear_runtime_settings,
    configure_model_settings,
    get_setting,
)
from rail_paginator.core.settings import PaginatorSettings
from rail_paginator.defaults import LIBRARY_DEFAULTS, merge_settings, validate_settings
from rail_paginator.exceptions import PaginatorConfigurationError
from rail_paginator.testing import override_model_settings, override_paginator_settings

pytestmark = pytest.mark.unit


class TestSettingsProxy:
    def test_library_defaults(self):
        with override_settings(RAIL_PAGINATOR={}):
            assert get_setting("window") == 4
            assert get_setting("param_name") == "page"
            assert get_setting("max_pages") is None
            assert get_setting("missing", "fallback") == "fallback"

    def test_global_settings_take_precedence(self):
        with override_settings(RAIL_PAGINATOR={"window": 2}):
            assert get_setting("window") == 2

    def test_cache_is_cleared_when_settings_change(self):
        with override_settings(RAIL_PAGINATOR={"window": 2}):
            assert get_setting("window") == 2
        with override_settings(RAIL_PAGINATOR={"window": 3}):
            assert get_setting("window") == 3

    def test_nested_keys(self):
        messages = {"de": {"views.pagination.next": "Weiter"}}
        with override_paginator_settings(messages=messages):
            proxy = SettingsProxy()
            assert proxy.get("messages.de") == {"views.pagination.next": "Weiter"}

    def test_override_merges_nested_messages(self):
        with override_paginator_settings(messages={"de": {"views.pagination.next": "Weiter"}}):
            with override_paginator_settings(messages={"fr": {"views.pagination.next": "Suivant"}}):
                proxy = SettingsProxy()
                assert proxy.get("messages.de") == {"views.pagination.next": "Weiter"}
                assert proxy.get("messages.fr") == {"views.pagination.next": "Suivant"}

    def test_model_settings_from_django_settings(self):
        with override_settings(
            RAIL_PAGINATOR={"default_per_page": 25},
            RAIL_PAGINATOR_MODELS={"test_app.User": {"default_per_page": 10}},
        ):
            assert get_setting("default_per_page", model="test_app.user") == 10
            assert get_setting("default_per_page", model="test_app.address") == 25

    def test_only_sizing_keys_are_per_model(self):
        with override_settings(RAIL_PAGINATOR_MODELS={"test_app.user": {"window": 1}}):
            assert get_setting("window", model="test_app.user") == 4

    def test_runtime_model_settings(self):
        try:
            configure_model_settings("test_app.user", max_pages=4)
            assert get_setting("max_pages", model="test_app.user") == 4
            assert get_setting("max_pages") is None
        finally:
            clear_runtime_settings("test_app.user")
        assert get_setting("max_pages", model="test_app.user") is None

    def test_override_model_settings_restores_state(self):
        with override_model_settings("test_app.user", default_per_page=5):
            assert get_setting("default_per_page", model="test_app.user") == 5
        assert get_setting("default_per_page", model="test_app.user") == 25

    def test_configure_requires_a_model(self):
        with pytest.raises(ValueError):
            configure_model_settings(object(), max_pages=1)


class TestPaginatorSettings:
    def test_from_settings(self):
        with override_paginator_settings(window=2, theme="bootstrap"):
            config = PaginatorSettings.from_settings()

        assert config.window == 2
        assert config.theme == "bootstrap"
        assert config.default_per_page == 25
        assert config.max_pages is None


class TestValidateSettings:
    def test_defaults_are_valid(self):
        assert validate_settings(LIBRARY_DEFAULTS) == []

    def test_invalid_values(self):
        errors = validate_settings(
            merge_settings(
                LIBRARY_DEFAULTS,
                {"default_per_page": 0, "window": -1, "param_name": "", "messages": []},
            )
        )

        assert "default_per_page must be a positive integer" in errors
        assert "window must be a non-negative integer" in errors
        assert "param_name must be a non-empty string" in errors
        assert "messages must be a dictionary keyed by language code" in errors

    def test_default_per_page_above_max(self):
        errors = validate_settings(
            merge_settings(LIBRARY_DEFAULTS, {"default_per_page": 50, "max_per_page": 20})
        )
        assert errors == ["default_per_page cannot be greater than max_per_page"]

    def test_merge_settings_is_deep(self):
        merged = merge_settings({"messages": {"de": {"a": "1"}}}, {"messages": {"fr": {"b": "2"}}})
        assert merged == {"messages": {"de": {"a": "1"}, "fr": {"b": "2"}}}


class TestAppConfigValidation:
    def _app_config(self):
        import rail_paginator

        return AppConfig("rail_paginator", rail_paginator)

    def test_raises_in_debug_mode(self):
        with override_settings(DEBUG=True, RAIL_PAGINATOR={"window": -1}):
            with pytest.raises(ImproperlyConfigured) as exc_info:
                self._app_config().ready()

        assert isinstance(exc_info.value, PaginatorConfigurationError)
        assert exc_info.value.errors == ["window must be a non-negative integer"]

    def test_logs_outside_debug_mode(self, caplog):
        with override_settings(DEBUG=False, RAIL_PAGINATOR={"window": -1}):
            self._app_config().ready()

        assert "Invalid RAIL_PAGINATOR settings" in caplog.text
