"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable with plain dicts wrapped in a repository.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .cafe_service import MAX_COUNT, CafeService, parse_count

__all__ = [
    "CafeService",
    "MAX_COUNT",
    "parse_count",
]
