"""In-memory implementation of CatalogProvider.

The catalog is copied into a read-only mapping of tuples at construction,
so it can be shared by concurrent requests without locking.
"""

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

from cafe_catalog.config import settings

logger = logging.getLogger(__name__)

DEFAULT_CATALOG: dict[str, list[str]] = {
    "moscow": [
        "Мир кофе",
        "Сладкоежка",
        "Кофе и завтраки",
        "Сытый студент",
        "Вилка и ложка",
    ],
    "tula": [
        "Тульский пряник",
        "Самовар",
        "Чайная на Советской",
    ],
}


class InMemoryCatalogRepository:
    """Immutable city -> café names catalog held in process memory.

    This class satisfies the CatalogProvider protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, catalog: Mapping[str, Iterable[str]]) -> None:
        """Initialize the repository.

        Args:
            catalog: Mapping from city name to ordered café names. Copied,
                so later changes to the argument are not visible here.
        """
        self._catalog: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {city: tuple(names) for city, names in catalog.items()}
        )

    @classmethod
    def create(cls, catalog_file: str | Path | None = None) -> "InMemoryCatalogRepository":
        """Factory method to create the repository with defaults.

        Args:
            catalog_file: JSON catalog path. If None, uses settings, and
                falls back to the built-in catalog when that is unset too.

        Returns:
            Configured InMemoryCatalogRepository
        """
        path = catalog_file or settings.catalog_file
        if path:
            return cls.from_json_file(path)
        return cls(DEFAULT_CATALOG)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryCatalogRepository":
        """Load a catalog from a JSON object of ``{"city": ["name", ...]}``.

        Args:
            path: Path to the JSON file

        Returns:
            Repository holding the file's catalog

        Raises:
            ValueError: If the file cannot be read or has the wrong shape
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to load catalog from {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Catalog in {path} must be a JSON object")

        for city, names in data.items():
            if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
                raise ValueError(f"Catalog entry {city!r} in {path} must be a list of strings")

        logger.info("Loaded catalog from %s (%d cities)", path, len(data))
        return cls(data)

    def get_cafes(self, city: str) -> Sequence[str] | None:
        return self._catalog.get(city)

    def has_city(self, city: str) -> bool:
        return city in self._catalog

    def cities(self) -> list[str]:
        return list(self._catalog)

    def __len__(self) -> int:
        return len(self._catalog)
