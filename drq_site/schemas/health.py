"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /api/health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    timestamp: str = Field(..., description="ISO-8601 server time")


class CacheStats(BaseModel):
    size: int
    namespaces: dict[str, int] = Field(default_factory=dict)


class ReadinessResponse(BaseModel):
    """Response for GET /api/health/ready."""

    status: str = Field(default="ok", description="Readiness status")
    cache: CacheStats
    catalog_entries: int = Field(..., serialization_alias="catalogEntries")
