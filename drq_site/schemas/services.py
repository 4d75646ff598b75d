"""Services listing schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ProcessStepItem(BaseModel):
    step: int
    title: str
    description: str


class EmergencyInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    available: bool
    response_time: str = Field(..., alias="responseTime")
    phone: str


class ServiceItem(BaseModel):
    id: str
    name: str
    description: str
    href: str
    features: list[str]
    process: list[ProcessStepItem]
    emergency: EmergencyInfo
    coverage: str


class ServicesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: list[ServiceItem]
    total: int
    status_code: int = Field(200, alias="statusCode")
