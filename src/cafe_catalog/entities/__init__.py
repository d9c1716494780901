"""Domain entities for internal representation.

These are frozen dataclasses used by services. They are not used for
API contracts - use DTOs from the dto package for that.
"""

from .cafe_query import CafeQuery

__all__ = ["CafeQuery"]
