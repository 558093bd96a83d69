"""
rail-paginator: pagination view helpers for Django.
"""

from .defaults import LIBRARY_NAME, LIBRARY_VERSION

__version__ = LIBRARY_VERSION

__all__ = ["LIBRARY_NAME", "LIBRARY_VERSION", "__version__"]
