"""Repository layer for data access.

Repositories hide where the catalog comes from behind the
CatalogProvider protocol (structural typing, not inheritance).
"""

from cafe_catalog.protocols import CatalogProvider

from .in_memory_catalog import DEFAULT_CATALOG, InMemoryCatalogRepository

__all__ = [
    "CatalogProvider",
    "DEFAULT_CATALOG",
    "InMemoryCatalogRepository",
]
