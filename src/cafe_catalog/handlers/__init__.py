"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .cafe_handler import ERROR_RESPONSES, CafeHandler

__all__ = [
    "CafeHandler",
    "ERROR_RESPONSES",
]
