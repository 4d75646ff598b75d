"""Covered regions: listing, availability by postcode, and range coverage check."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from drq_site.api.dependencies import get_catalog, get_service_area_service
from drq_site.application.use_cases.service_areas import ServiceAreaService
from drq_site.core.config import Settings, get_settings
from drq_site.domain.enums import CatalogKind
from drq_site.infrastructure.catalog import StaticCatalog
from drq_site.schemas.service_area import (
    AreaAvailabilityRequest,
    AreaAvailabilityResponse,
    EmergencyResponseInfo,
    PostcodeCoverageResponse,
    RegionDetails,
)

router = APIRouter()

REGIONS_CACHE_CONTROL = "public, max-age=3600, stale-while-revalidate=7200"
COVERAGE_CACHE_CONTROL = "public, s-maxage=3600, stale-while-revalidate=7200"
NOT_SERVICED_MESSAGE = (
    "Sorry, we do not currently service this area. Please contact us for more information."
)


def _service_titles(catalog: StaticCatalog) -> list[str]:
    return [e.title for e in catalog.entries(CatalogKind.SERVICE)]


@router.get("", response_model=list[RegionDetails])
def list_regions(
    response: Response,
    svc: Annotated[ServiceAreaService, Depends(get_service_area_service)],
    catalog: Annotated[StaticCatalog, Depends(get_catalog)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Every covered region with its postcode range, services and emergency response."""
    services = _service_titles(catalog)
    emergency = EmergencyResponseInfo(response_time=settings.emergency_response_time)
    response.headers["Cache-Control"] = REGIONS_CACHE_CONTROL
    return [
        RegionDetails(
            name=r.area,
            postcodes=(r.start, r.end),
            services=services,
            emergency_response=emergency,
        )
        for r in svc.regions()
    ]


@router.post("", response_model=AreaAvailabilityResponse, response_model_exclude_none=True)
def check_availability(
    body: AreaAvailabilityRequest,
    svc: Annotated[ServiceAreaService, Depends(get_service_area_service)],
    catalog: Annotated[StaticCatalog, Depends(get_catalog)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Region serving the postcode, or available=false with a message (400 malformed)."""
    region = svc.find_region(body.postcode)
    if region is None:
        return AreaAvailabilityResponse(available=False, message=NOT_SERVICED_MESSAGE)
    return AreaAvailabilityResponse(
        available=True,
        area=region.area,
        services=_service_titles(catalog),
        emergency_response=EmergencyResponseInfo(
            response_time=settings.emergency_response_time
        ),
    )


@router.get("/check/{postcode}", response_model=PostcodeCoverageResponse)
def check_postcode(
    postcode: str,
    response: Response,
    svc: Annotated[ServiceAreaService, Depends(get_service_area_service)],
):
    """Whether any covered range contains the postcode, with every matching region."""
    coverage = svc.check_coverage(postcode)
    response.headers["Cache-Control"] = COVERAGE_CACHE_CONTROL
    return PostcodeCoverageResponse(
        postcode=coverage.postcode,
        is_serviced=coverage.is_serviced,
        areas=coverage.areas,
    )
