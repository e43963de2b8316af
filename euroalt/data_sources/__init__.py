"""
Data source module
"""

from .catalogue import (
    BUNDLED_CATALOGUE,
    CatalogueLoader,
    CatalogueLoadError,
    get_catalogue,
)

__all__ = [
    "BUNDLED_CATALOGUE",
    "CatalogueLoader",
    "CatalogueLoadError",
    "get_catalogue",
]
