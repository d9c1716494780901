"""Typed errors raised while validating a café query.

Services raise ``CafeQueryError`` with a discriminating ``QueryErrorKind``.
Only the handler layer turns a kind into a status code and response text.
"""

from enum import Enum


class QueryErrorKind(str, Enum):
    """Kinds of client-side query validation failures."""

    INVALID_CITY = "invalid_city"
    INVALID_COUNT = "invalid_count"


class CafeQueryError(Exception):
    """Raised when a café query fails validation.

    Attributes:
        kind: Which validation rule failed
        value: The raw offending parameter value (None when it was missing)
    """

    def __init__(self, kind: QueryErrorKind, value: str | None = None) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"{kind.value}: {value!r}")
