from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from cafe_catalog.api.dependencies import HandlerDep, lifespan
from cafe_catalog.config import settings
from cafe_catalog.dto import ApiInfoResponse, HealthCheckResponse
from cafe_catalog.logging_config import setup_logging
from cafe_catalog.protocols import CatalogProvider

API_NAME = "Cafe Catalog API"
API_VERSION = "0.1.0"
API_DESCRIPTION = "Lists cafés of a city, optionally filtered by name and capped by count"


def create_app(catalog: CatalogProvider | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        catalog: Catalog to serve. If None, the lifespan loads the
            configured one (CATALOG_FILE or the built-in catalog).

    Returns:
        The configured FastAPI app
    """
    setup_logging(settings.log_level)

    app = FastAPI(
        title=API_NAME,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.catalog = catalog

    @app.get("/", response_model=ApiInfoResponse)
    async def root() -> ApiInfoResponse:
        """Root endpoint with API information."""
        return ApiInfoResponse(
            name=API_NAME,
            version=API_VERSION,
            description=API_DESCRIPTION,
            endpoints={
                "cafe": "/cafe?city=<city>&count=<n>&search=<text>",
                "health": "/health",
                "docs": "/docs",
            },
        )

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/cafe", response_class=PlainTextResponse)
    async def cafe(
        handler: HandlerDep,
        city: str | None = None,
        count: str | None = None,
        search: str | None = None,
    ) -> PlainTextResponse:
        """List cafés of a city as comma-separated names.

        Args:
            city: Catalog key (required, 400 "unknown city" otherwise)
            count: Non-negative integer cap on the number of names
            search: Case-insensitive substring the names must contain
        """
        return await handler.list_cafes(city=city, count=count, search=search)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cafe_catalog.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
