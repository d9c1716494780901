"""Catalog provider protocol.

Defines the read-only interface the service needs from whatever holds
the city -> café names catalog.

Implementations can include:
- In-memory mapping (default, built-in or loaded from JSON)
- Any other source populated before serving starts
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class CatalogProvider(Protocol):
    """Protocol for read-only café catalogs.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed. Implementations must not change
    their contents once the first request has been served.

    Example:
        ```python
        from cafe_catalog.protocols import CatalogProvider

        catalog: CatalogProvider = InMemoryCatalogRepository({"tula": ["Самовар"]})
        ```
    """

    def get_cafes(self, city: str) -> Sequence[str] | None:
        """Return the ordered café names for a city.

        Args:
            city: Exact catalog key

        Returns:
            The café names in catalog order, or None if the city is unknown
        """
        ...

    def has_city(self, city: str) -> bool:
        """Check whether the city is a catalog key.

        Args:
            city: Exact catalog key

        Returns:
            True if known, False otherwise
        """
        ...

    def cities(self) -> list[str]:
        """Return all catalog keys.

        Returns:
            City names in insertion order
        """
        ...
