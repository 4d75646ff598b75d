"""Emergency request and contact form schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ContactDetails(BaseModel):
    phone: str
    email: str


class EmergencyRequestBody(BaseModel):
    """Body for POST /api/emergency. Required fields are checked by the service (400)."""

    name: str | None = None
    phone: str | None = None
    service: str | None = None
    postcode: str | None = None
    message: str | None = None


class EmergencyRequestResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Emergency request received"
    request_id: str = Field(..., alias="requestId")
    response_time: str = Field(..., alias="responseTime")
    contact: ContactDetails
    next_steps: list[str] = Field(..., alias="nextSteps")


class ContactFormBody(BaseModel):
    """Body for POST /api/contact."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    email: str | None = None
    message: str | None = None
    phone: str = ""
    postcode: str = ""
    service_type: str = Field("", alias="serviceType")
    is_emergency: bool = Field(False, alias="isEmergency")


class ContactSubmission(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    phone: str
    message: str
    postcode: str
    service_type: str = Field(..., alias="serviceType")
    is_emergency: bool = Field(..., alias="isEmergency")


class ContactFormResponse(BaseModel):
    message: str = "Contact form submitted successfully"
    data: ContactSubmission
