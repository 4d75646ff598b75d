"""Services listing API."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from drq_site.application.use_cases.services_listing import list_services
from drq_site.core.config import Settings, get_settings
from drq_site.schemas.services import (
    EmergencyInfo,
    ProcessStepItem,
    ServiceItem,
    ServicesResponse,
)

router = APIRouter()


@router.get("", response_model=ServicesResponse)
def get_services(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Every service with features, process steps and emergency availability."""
    items = [
        ServiceItem(
            id=s.id,
            name=s.name,
            description=s.description,
            href=s.href,
            features=s.features,
            process=[
                ProcessStepItem(step=p.step, title=p.title, description=p.description)
                for p in s.process
            ],
            emergency=EmergencyInfo(
                available=s.emergency_available,
                response_time=s.response_time,
                phone=settings.emergency_phone,
            ),
            coverage=s.coverage,
        )
        for s in list_services()
    ]
    response.headers["Cache-Control"] = "public, s-maxage=3600, stale-while-revalidate=86400"
    return ServicesResponse(data=items, total=len(items))
