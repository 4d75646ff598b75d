"""Emergency callback request intake."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from drq_site.api.dependencies import get_emergency_request_service
from drq_site.application.dtos.intake import EmergencyRequestCreate
from drq_site.application.use_cases.intake import (
    EMERGENCY_NEXT_STEPS,
    EmergencyRequestService,
)
from drq_site.core.limiter import limit_forms
from drq_site.schemas.intake import (
    ContactDetails,
    EmergencyRequestBody,
    EmergencyRequestResponse,
)

router = APIRouter()


@router.post("", response_model=EmergencyRequestResponse)
@limit_forms
async def create_emergency_request(
    request: Request,
    response: Response,
    body: EmergencyRequestBody,
    svc: Annotated[EmergencyRequestService, Depends(get_emergency_request_service)],
):
    """Record an emergency callback request; 400 on bad input or uncovered postcode."""
    result = svc.submit(
        EmergencyRequestCreate(
            name=body.name or "",
            phone=body.phone or "",
            service=body.service or "",
            postcode=body.postcode or None,
            message=body.message,
        )
    )
    response.headers["Cache-Control"] = "no-store"
    return EmergencyRequestResponse(
        request_id=result.id,
        response_time=result.response_time,
        contact=ContactDetails(phone=svc.phone, email=svc.email),
        next_steps=EMERGENCY_NEXT_STEPS,
    )
