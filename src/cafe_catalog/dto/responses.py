"""Response DTOs for API endpoints.

The /cafe endpoint answers in plain text; these models cover the
auxiliary JSON endpoints.
"""

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cities: int = Field(..., description="Number of cities in the loaded catalog", ge=0)


class ApiInfoResponse(BaseModel):
    """Response DTO for the root endpoint."""

    name: str
    version: str
    description: str
    endpoints: dict[str, str] = Field(default_factory=dict)
