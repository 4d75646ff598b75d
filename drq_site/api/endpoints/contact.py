"""Contact form intake."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from drq_site.api.dependencies import get_contact_service
from drq_site.application.dtos.intake import ContactSubmissionCreate
from drq_site.application.use_cases.intake import ContactService
from drq_site.core.limiter import limit_forms
from drq_site.schemas.intake import ContactFormBody, ContactFormResponse, ContactSubmission

router = APIRouter()


@router.post("", response_model=ContactFormResponse)
@limit_forms
async def submit_contact_form(
    request: Request,
    response: Response,
    body: ContactFormBody,
    svc: Annotated[ContactService, Depends(get_contact_service)],
):
    """Record a contact form submission (400 when name, email or message is missing)."""
    result = svc.submit(
        ContactSubmissionCreate(
            name=body.name or "",
            email=body.email or "",
            message=body.message or "",
            phone=body.phone,
            postcode=body.postcode,
            service_type=body.service_type,
            is_emergency=body.is_emergency,
        )
    )
    response.headers["Cache-Control"] = "no-store"
    return ContactFormResponse(
        data=ContactSubmission(
            id=result.id,
            name=result.name,
            email=result.email,
            phone=result.phone,
            message=result.message,
            postcode=result.postcode,
            service_type=result.service_type,
            is_emergency=result.is_emergency,
        )
    )
