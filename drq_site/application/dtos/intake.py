"""DTOs for emergency requests and contact form submissions."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class EmergencyRequestCreate:
    """Validated input for an emergency callback request."""

    name: str
    phone: str
    service: str
    postcode: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class EmergencyRequestResult:
    """Stored emergency request (read-model)."""

    id: str
    name: str
    phone: str
    service: str
    postcode: str | None
    message: str | None
    received_at: datetime
    status: str = "received"
    priority: str = "high"
    response_time: str = "1-2 hours"
    assigned_team: str = "Emergency Response Unit"


@dataclass(frozen=True)
class ContactSubmissionCreate:
    """Validated input for the contact form."""

    name: str
    email: str
    message: str
    phone: str = ""
    postcode: str = ""
    service_type: str = ""
    is_emergency: bool = False


@dataclass(frozen=True)
class ContactSubmissionResult:
    """Stored contact submission (read-model)."""

    id: str
    name: str
    email: str
    message: str
    phone: str
    postcode: str
    service_type: str
    is_emergency: bool
    received_at: datetime


@dataclass(frozen=True)
class ProcessStep:
    step: int
    title: str
    description: str


@dataclass(frozen=True)
class ServiceDetail:
    """Service catalog entry enriched for the services listing."""

    id: str
    name: str
    description: str
    href: str
    features: list[str] = field(default_factory=list)
    process: list[ProcessStep] = field(default_factory=list)
    emergency_available: bool = True
    response_time: str = "1-2 hours"
    coverage: str = "South East Queensland"
