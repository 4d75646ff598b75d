"""Client analytics events: intake, plus a debug-only listing."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from drq_site.api.dependencies import get_analytics_service
from drq_site.application.use_cases.analytics import AnalyticsService
from drq_site.domain.exceptions import ValidationException
from drq_site.schemas.analytics import (
    AnalyticsAck,
    AnalyticsEventBody,
    AnalyticsListResponse,
    StoredAnalyticsEvent,
)
from drq_site.shared.utils.datetime import iso_timestamp

router = APIRouter()


@router.post("", response_model=AnalyticsAck)
def record_event(
    svc: Annotated[AnalyticsService, Depends(get_analytics_service)],
    payload: Annotated[Any, Body()] = None,
):
    """Store one event (400 when event or data is missing or malformed)."""
    try:
        body = AnalyticsEventBody.model_validate(payload)
    except ValidationError as e:
        loc = e.errors()[0]["loc"]
        raise ValidationException(
            "Invalid analytics data", field=".".join(str(p) for p in loc) or None
        ) from e
    svc.record(body.event, body.data.model_dump(by_alias=True, exclude_none=True))
    return AnalyticsAck()


@router.get("", response_model=AnalyticsListResponse)
def list_events(svc: Annotated[AnalyticsService, Depends(get_analytics_service)]):
    """Stored events, oldest first. Only served when DEBUG is on (403 otherwise)."""
    return AnalyticsListResponse(
        data=[
            StoredAnalyticsEvent(
                event=e.event, data=e.data, timestamp=iso_timestamp(e.received_at)
            )
            for e in svc.list_events()
        ]
    )
