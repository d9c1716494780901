"""Café query domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CafeQuery:
    """Validated representation of a single /cafe request.

    Attributes:
        city: Catalog key, already known to exist
        count: Maximum number of names to return, None for no limit
        search: Case-insensitive substring filter, None for no filter
    """

    city: str
    count: int | None = None
    search: str | None = None
