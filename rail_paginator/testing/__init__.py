"""
Public test utilities for rail-paginator.
"""

from .harness import build_request, override_model_settings, override_paginator_settings

__all__ = [
    "build_request",
    "override_model_settings",
    "override_paginator_settings",
]
