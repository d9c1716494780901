"""Cafe Catalog - city café listings over HTTP.

This package provides a layered architecture for answering café queries:

Layers:
    - protocols: Interface contracts (CatalogProvider)
    - repositories: Data access implementations
    - services: Query validation and filtering
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from cafe_catalog.repositories import InMemoryCatalogRepository
    from cafe_catalog.services import CafeService

    service = CafeService.create(catalog=InMemoryCatalogRepository.create())
    service.query(city="moscow", search="кофе")
    ```

For HTTP API:
    ```python
    from cafe_catalog.api.app import app, create_app
    ```
"""

from cafe_catalog.config import settings
from cafe_catalog.dto import ApiInfoResponse, HealthCheckResponse
from cafe_catalog.entities import CafeQuery
from cafe_catalog.errors import CafeQueryError, QueryErrorKind
from cafe_catalog.handlers import CafeHandler
from cafe_catalog.protocols import CatalogProvider
from cafe_catalog.repositories import InMemoryCatalogRepository
from cafe_catalog.services import CafeService

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "CatalogProvider",
    # Services (business logic)
    "CafeService",
    # Handlers (HTTP)
    "CafeHandler",
    # Repositories (data access)
    "InMemoryCatalogRepository",
    # Entities (domain models)
    "CafeQuery",
    # Errors
    "CafeQueryError",
    "QueryErrorKind",
    # DTOs (API contracts)
    "ApiInfoResponse",
    "HealthCheckResponse",
]
