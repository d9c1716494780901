"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Catalog optionally injected into app.state by create_app
    - Services built from it during lifespan
    - Dependency functions retrieve from request.app.state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from cafe_catalog.handlers import CafeHandler
from cafe_catalog.repositories import InMemoryCatalogRepository
from cafe_catalog.services import CafeService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> CafeHandler:
    """Dependency injection for CafeHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "cafe_handler", None)
    if handler is None:
        raise RuntimeError("CafeHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Catalog - app.state.catalog if injected, otherwise the configured one
    2. Service - app.state.cafe_service
    3. Handler - app.state.cafe_handler

    Cleanup:
        Removes the service and handler from app.state on shutdown
    """
    catalog = getattr(app.state, "catalog", None)
    if catalog is None:
        catalog = InMemoryCatalogRepository.create()

    cafe_service = CafeService.create(catalog=catalog)
    cafe_handler = CafeHandler(cafe_service=cafe_service)

    app.state.cafe_service = cafe_service
    app.state.cafe_handler = cafe_handler

    logger.info("Cafe catalog ready: %d cities (%s)", len(catalog.cities()), ", ".join(catalog.cities()))

    yield

    del app.state.cafe_handler
    del app.state.cafe_service
    logger.info("Cafe service shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[CafeHandler, Depends(get_handler)]