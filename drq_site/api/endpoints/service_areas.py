"""Service areas API: full list and exact-postcode lookup, both cached."""

from typing import Annotated

from fastapi import APIRouter, Depends

from drq_site.api.dependencies import get_service_area_service
from drq_site.application.use_cases.service_areas import ServiceAreaService
from drq_site.schemas.service_area import (
    PostcodeLookupRequest,
    ServiceAreaItem,
    ServiceAreaListResponse,
)

router = APIRouter()


@router.get("", response_model=ServiceAreaListResponse)
def list_service_areas(
    svc: Annotated[ServiceAreaService, Depends(get_service_area_service)],
):
    """All service areas."""
    return ServiceAreaListResponse(
        data=[ServiceAreaItem(**a.to_dict()) for a in svc.list_areas()]
    )


@router.post("", response_model=ServiceAreaListResponse)
def lookup_service_areas(
    body: PostcodeLookupRequest,
    svc: Annotated[ServiceAreaService, Depends(get_service_area_service)],
):
    """Service areas with exactly this postcode (400 malformed, 404 none)."""
    areas = svc.find_by_postcode(body.postcode)
    return ServiceAreaListResponse(data=[ServiceAreaItem(**a.to_dict()) for a in areas])
