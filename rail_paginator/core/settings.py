"""
PaginatorSettings implementation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..config_proxy import get_settings_proxy
from ..defaults import LIBRARY_DEFAULTS


@dataclass
class PaginatorSettings:
    """Resolved settings used by the pagination helpers."""
    default_per_page: int = 25
    max_per_page: Optional[int] = None
    max_pages: Optional[int] = None
    window: int = 4
    outer_window: int = 0
    left: int = 0
    right: int = 0
    param_name: str = "page"
    params_on_first_page: bool = False
    theme: str = "default"
    views_prefix: str = ""
    messages: Dict[str, Any] = field(default_factory=dict)
    inflections: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, model: Any = None) -> "PaginatorSettings":
        proxy = get_settings_proxy(model)
        valid_fields = set(cls.__dataclass_fields__.keys())
        values = {key: proxy.get(key) for key in LIBRARY_DEFAULTS if key in valid_fields}
        return cls(**values)
