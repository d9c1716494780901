"""Protocol interfaces for swappable implementations.

Protocols use structural typing, so tests can pass any object with the
right methods in place of the real catalog.
"""

from .catalog_provider import CatalogProvider

__all__ = [
    "CatalogProvider",
]
