"""HTTP handlers for café queries.

Handlers convert between raw request parameters and service calls.
They own HTTP concerns: status codes, response text and error mapping.
"""

import logging

from fastapi import status
from fastapi.responses import PlainTextResponse

from cafe_catalog.dto import HealthCheckResponse
from cafe_catalog.errors import CafeQueryError, QueryErrorKind
from cafe_catalog.services import CafeService

logger = logging.getLogger(__name__)

ERROR_RESPONSES: dict[QueryErrorKind, tuple[int, str]] = {
    QueryErrorKind.INVALID_CITY: (status.HTTP_400_BAD_REQUEST, "unknown city"),
    QueryErrorKind.INVALID_COUNT: (status.HTTP_400_BAD_REQUEST, "incorrect count"),
}


class CafeHandler:
    """HTTP handlers for café queries.

    This handler delegates query logic to CafeService and handles:
    - Translating CafeQueryError kinds into status code and message
    - Writing the comma-joined body as plain text

    Example:
        ```python
        handler = CafeHandler(cafe_service=CafeService.create(catalog))

        @app.get("/cafe", response_class=PlainTextResponse)
        async def cafe(city: str | None = None, count: str | None = None, search: str | None = None):
            return await handler.list_cafes(city, count, search)
        ```
    """

    def __init__(self, cafe_service: CafeService) -> None:
        """Initialize the café handler.

        Args:
            cafe_service: The café service for query logic (required).
        """
        self._cafes = cafe_service

    async def list_cafes(
        self,
        city: str | None,
        count: str | None = None,
        search: str | None = None,
    ) -> PlainTextResponse:
        """Handle GET /cafe requests.

        Args:
            city: Raw ``city`` query parameter
            count: Raw ``count`` query parameter
            search: Raw ``search`` query parameter

        Returns:
            200 with comma-joined names, or 400 with a one-line error message
        """
        try:
            cafes = self._cafes.query(city=city, count=count, search=search)
        except CafeQueryError as e:
            status_code, message = ERROR_RESPONSES[e.kind]
            logger.warning("Rejected /cafe request: %s", e)
            return PlainTextResponse(message, status_code=status_code)

        return PlainTextResponse(self._cafes.serialize(cafes), status_code=status.HTTP_200_OK)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        return HealthCheckResponse(
            status="healthy",
            cities=len(self._cafes.catalog.cities()),
        )
