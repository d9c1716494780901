"""Data Transfer Objects for API contracts.

These Pydantic models define the external JSON contract.
Internal logic should use entities from the entities package.
"""

from .responses import ApiInfoResponse, HealthCheckResponse

__all__ = [
    "ApiInfoResponse",
    "HealthCheckResponse",
]
