"""
Configuration management for Rail Paginator.

This module provides a settings proxy that handles hierarchical configuration
resolution from model-specific, Django global, and library default settings.
"""

import logging
from typing import Any, Optional

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

from .defaults import LIBRARY_DEFAULTS, MODEL_SETTING_KEYS

logger = logging.getLogger(__name__)

# Runtime storage for model settings overrides (avoids modifying Django settings)
_RUNTIME_MODEL_SETTINGS: dict[str, dict[str, Any]] = {}


def normalize_model_label(model: Any) -> Optional[str]:
    """Return ``app_label.model_name`` for a model class, instance or label."""
    if model is None:
        return None
    if isinstance(model, str):
        return model.lower()
    meta = getattr(model, "_meta", None)
    if meta is None:
        return None
    return meta.label_lower


class SettingsProxy:
    """
    Proxy for accessing Rail Paginator settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Runtime model-specific settings (via configure_model_settings)
    2. Model-specific settings (RAIL_PAGINATOR_MODELS[model_label])
    3. Global Django settings (RAIL_PAGINATOR)
    4. Library defaults (LIBRARY_DEFAULTS)
    """

    def __init__(self, model_label: Optional[str] = None):
        """
        Initialize the settings proxy.

        Args:
            model_label: ``app_label.model_name`` for model-specific settings
        """
        self.model_label = normalize_model_label(model_label)
        self._cache: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value with hierarchical resolution and caching.

        Args:
            key: Setting key to retrieve
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        cache_key = f"{self.model_label}:{key}" if self.model_label else f"global:{key}"

        if cache_key in self._cache:
            return self._cache[cache_key]

        model_value = self._get_model_setting(key)
        if model_value is not None:
            self._cache[cache_key] = model_value
            return model_value

        django_value = self._get_django_setting(key)
        if django_value is not None:
            self._cache[cache_key] = django_value
            return django_value

        library_value = self._get_library_default(key)
        if library_value is not None:
            self._cache[cache_key] = library_value
            return library_value

        self._cache[cache_key] = default
        return default

    def _get_model_setting(self, key: str) -> Any:
        """
        Get setting from model-specific configuration.

        Only the sizing keys can be set per model; anything else is global.
        """
        if not self.model_label:
            return None
        if key.split(".", 1)[0] not in MODEL_SETTING_KEYS:
            return None

        runtime_settings = _RUNTIME_MODEL_SETTINGS.get(self.model_label)
        if runtime_settings:
            val = self._get_nested_value(runtime_settings, key)
            if val is not None:
                return val

        model_settings = getattr(settings, "RAIL_PAGINATOR_MODELS", {}) or {}
        model_config = {
            str(label).lower(): value for label, value in model_settings.items()
        }.get(self.model_label)
        if not model_config:
            return None
        return self._get_nested_value(model_config, key)

    def _get_django_setting(self, key: str) -> Any:
        """Get setting from the global Django ``RAIL_PAGINATOR`` dict."""
        return self._get_nested_value(getattr(settings, "RAIL_PAGINATOR", {}), key)

    def _get_library_default(self, key: str) -> Any:
        """Get setting from library defaults."""
        return self._get_nested_value(LIBRARY_DEFAULTS, key)

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve (supports dot notation for nested access)

        Returns:
            The value or None if not found
        """
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current

    def as_dict(self) -> dict[str, Any]:
        """Resolve every known setting into a plain dictionary."""
        return {key: self.get(key) for key in LIBRARY_DEFAULTS}

    def clear_cache(self) -> None:
        """Clear the settings cache."""
        self._cache.clear()


# Global settings proxy instance (no model-specific settings)
settings_proxy = SettingsProxy()
_model_proxies: dict[str, SettingsProxy] = {}


def get_settings_proxy(model: Any = None) -> SettingsProxy:
    """
    Get a settings proxy for the given model (class, instance or label).

    Proxies are cached per model label so repeated lookups stay cheap.
    """
    label = normalize_model_label(model)
    if not label:
        return settings_proxy
    proxy = _model_proxies.get(label)
    if proxy is None:
        proxy = SettingsProxy(label)
        _model_proxies[label] = proxy
    return proxy


def get_setting(key: str, default: Any = None, model: Any = None) -> Any:
    """
    Get a setting value using the hierarchical settings system.

    Args:
        key: Setting key to retrieve
        default: Default value if setting is not found
        model: Model class, instance or label for model-specific settings

    Returns:
        The setting value from the highest priority source
    """
    return get_settings_proxy(model).get(key, default)


def clear_settings_cache() -> None:
    """Clear cached values of every settings proxy."""
    settings_proxy.clear_cache()
    for proxy in _model_proxies.values():
        proxy.clear_cache()


def configure_model_settings(
    model: Any, clear_existing: bool = False, **overrides: Any
) -> None:
    """
    Configure model-specific settings overrides at runtime.

    Args:
        model: Model class, instance or label to configure
        clear_existing: Whether to clear existing runtime settings for this model
        **overrides: Setting key-value pairs (``None`` removes an override)
    """
    label = normalize_model_label(model)
    if not label:
        raise ValueError(f"Cannot resolve a model label from {model!r}")

    unknown = set(overrides) - set(MODEL_SETTING_KEYS)
    if unknown:
        logger.warning(
            "Ignoring non per-model paginator settings for %s: %s",
            label,
            ", ".join(sorted(unknown)),
        )

    if clear_existing or label not in _RUNTIME_MODEL_SETTINGS:
        _RUNTIME_MODEL_SETTINGS[label] = {}

    for key, value in overrides.items():
        if key not in MODEL_SETTING_KEYS:
            continue
        if value is None:
            _RUNTIME_MODEL_SETTINGS[label].pop(key, None)
        else:
            _RUNTIME_MODEL_SETTINGS[label][key] = value

    clear_settings_cache()


def clear_runtime_settings(model: Any = None) -> None:
    """
    Clear runtime settings overrides.

    Args:
        model: If provided, only clear settings for this model.
               If None, clear all runtime settings.
    """
    label = normalize_model_label(model)
    if label:
        _RUNTIME_MODEL_SETTINGS.pop(label, None)
    else:
        _RUNTIME_MODEL_SETTINGS.clear()

    clear_settings_cache()


@receiver(setting_changed)
def _reset_on_setting_changed(sender, setting, **kwargs):
    if setting in {"RAIL_PAGINATOR", "RAIL_PAGINATOR_MODELS"}:
        clear_settings_cache()
