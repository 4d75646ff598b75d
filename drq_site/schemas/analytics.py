"""Client analytics event schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AnalyticsEventData(BaseModel):
    """Event payload; unknown keys are kept as sent."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    timestamp: str
    path: str
    user_agent: str = Field(..., alias="userAgent")
    form_type: str | None = Field(None, alias="formType")
    urgency: str | None = None
    service_type: str | None = Field(None, alias="serviceType")
    error: str | None = None
    type: str | None = None


class AnalyticsEventBody(BaseModel):
    """Body for POST /api/analytics. Checked in the endpoint so failures are 400."""

    event: str
    data: AnalyticsEventData


class AnalyticsAck(BaseModel):
    success: bool = True


class StoredAnalyticsEvent(BaseModel):
    event: str
    data: dict[str, Any]
    timestamp: str


class AnalyticsListResponse(BaseModel):
    success: bool = True
    data: list[StoredAnalyticsEvent]
