"""Café service for core query logic.

This service validates raw query parameters against the catalog and
computes the filtered, truncated list of café names for a city.
"""

import logging
import re

from cafe_catalog.entities import CafeQuery
from cafe_catalog.errors import CafeQueryError, QueryErrorKind
from cafe_catalog.protocols import CatalogProvider

logger = logging.getLogger(__name__)

# Largest count accepted; anything above is treated as an overflow.
MAX_COUNT = 2**63 - 1

_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_count(raw: str | None) -> int | None:
    """Parse the ``count`` query parameter.

    Args:
        raw: Raw parameter value, None or "" when absent

    Returns:
        The non-negative count, or None for no limit

    Raises:
        CafeQueryError: If the value is not a non-negative base-10 integer
    """
    if raw is None or raw == "":
        return None

    if not _COUNT_PATTERN.fullmatch(raw):
        raise CafeQueryError(QueryErrorKind.INVALID_COUNT, raw)

    count = int(raw)
    if count < 0 or count > MAX_COUNT:
        raise CafeQueryError(QueryErrorKind.INVALID_COUNT, raw)
    return count


class CafeService:
    """Query orchestration over a read-only catalog.

    The service depends on the CatalogProvider PROTOCOL, so tests can
    hand it any object with the same methods.

    Example:
        ```python
        from cafe_catalog.repositories import InMemoryCatalogRepository
        from cafe_catalog.services import CafeService

        service = CafeService.create(catalog=InMemoryCatalogRepository.create())
        names = service.query(city="moscow", count="2")
        ```
    """

    def __init__(self, catalog: CatalogProvider) -> None:
        """Initialize the café service.

        Args:
            catalog: Read-only catalog provider (required).
        """
        self._catalog = catalog

    @classmethod
    def create(cls, catalog: CatalogProvider) -> "CafeService":
        """Factory method to create CafeService.

        Args:
            catalog: Read-only catalog provider (required).

        Returns:
            Configured CafeService instance
        """
        return cls(catalog=catalog)

    @property
    def catalog(self) -> CatalogProvider:
        """The catalog this service reads from."""
        return self._catalog

    def parse_query(
        self,
        city: str | None,
        count: str | None = None,
        search: str | None = None,
    ) -> CafeQuery:
        """Validate raw request parameters.

        City is checked before count, so a request with both wrong
        reports the city.

        Args:
            city: Raw ``city`` parameter
            count: Raw ``count`` parameter
            search: Raw ``search`` parameter

        Returns:
            A validated CafeQuery

        Raises:
            CafeQueryError: INVALID_CITY or INVALID_COUNT
        """
        if not city or not self._catalog.has_city(city):
            raise CafeQueryError(QueryErrorKind.INVALID_CITY, city)

        return CafeQuery(
            city=city,
            count=parse_count(count),
            search=search or None,
        )

    def find_cafes(self, query: CafeQuery) -> list[str]:
        """Compute the result list for a validated query.

        Business logic:
        1. Take the city's café names in catalog order
        2. Keep names containing the search string, ignoring case
        3. Keep at most ``count`` names from the front

        Args:
            query: A query produced by parse_query

        Returns:
            Café names, in catalog order
        """
        cafes = list(self._catalog.get_cafes(query.city) or ())

        if query.search:
            needle = query.search.lower()
            cafes = [name for name in cafes if needle in name.lower()]

        if query.count is not None:
            cafes = cafes[: query.count]

        return cafes

    def query(
        self,
        city: str | None,
        count: str | None = None,
        search: str | None = None,
    ) -> list[str]:
        """Validate raw parameters and return the matching café names.

        Raises:
            CafeQueryError: If validation fails
        """
        cafe_query = self.parse_query(city=city, count=count, search=search)
        cafes = self.find_cafes(cafe_query)
        logger.debug("Query %s matched %d cafes", cafe_query, len(cafes))
        return cafes

    @staticmethod
    def serialize(cafes: list[str]) -> str:
        """Join café names with a single comma (empty string for none)."""
        return ",".join(cafes)
