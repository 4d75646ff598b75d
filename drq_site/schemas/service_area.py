"""Service area API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceAreaItem(BaseModel):
    id: int
    name: str
    postcode: str
    state: str


class ServiceAreaListResponse(BaseModel):
    """Envelope for GET/POST /api/service-areas."""

    model_config = ConfigDict(populate_by_name=True)

    data: list[ServiceAreaItem]
    status_code: int = Field(200, alias="statusCode")
    message: str = "Service areas retrieved successfully"


class PostcodeLookupRequest(BaseModel):
    """Body for POST /api/service-areas. Postcode format is checked by the service (400)."""

    postcode: Any = None


class PostcodeCoverageResponse(BaseModel):
    """Response for GET /api/areas/check/{postcode}."""

    model_config = ConfigDict(populate_by_name=True)

    postcode: str
    is_serviced: bool = Field(..., alias="isServiced")
    areas: list[str]


class EmergencyResponseInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    available: bool = True
    response_time: str = Field(..., alias="responseTime")


class RegionCoverage(BaseModel):
    residential: bool = True
    commercial: bool = True
    industrial: bool = True


class RegionDetails(BaseModel):
    """One covered region in GET /api/areas."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    postcodes: tuple[str, str]
    services: list[str]
    emergency_response: EmergencyResponseInfo = Field(..., alias="emergencyResponse")
    coverage: RegionCoverage = Field(default_factory=RegionCoverage)


class AreaAvailabilityRequest(BaseModel):
    """Body for POST /api/areas. Postcode format is checked by the service (400)."""

    postcode: Any = None


class AreaAvailabilityResponse(BaseModel):
    """POST /api/areas: region details when covered, otherwise a message."""

    model_config = ConfigDict(populate_by_name=True)

    available: bool
    area: str | None = None
    services: list[str] | None = None
    emergency_response: EmergencyResponseInfo | None = Field(None, alias="emergencyResponse")
    message: str | None = None
