"""Customer intake use cases: emergency callback requests and contact form."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from drq_site.application.dtos.intake import (
    ContactSubmissionCreate,
    ContactSubmissionResult,
    EmergencyRequestCreate,
    EmergencyRequestResult,
)
from drq_site.domain.enums import CatalogKind
from drq_site.domain.exceptions import OutsideServiceAreaException, ValidationException
from drq_site.shared.utils.generators import generate_cuid, generate_emergency_request_id

if TYPE_CHECKING:
    from drq_site.application.interfaces.repositories import (
        ICatalog,
        IContactRepository,
        IEmergencyRequestRepository,
    )
    from drq_site.application.services.tracking_service import TrackingService
    from drq_site.application.use_cases.service_areas import ServiceAreaService

logger = logging.getLogger(__name__)

EMERGENCY_NEXT_STEPS = [
    "Our emergency team has been notified",
    "You will receive a call within 15 minutes",
    "Please ensure safe access to the affected area",
    "Gather any relevant insurance information if available",
]


def _missing(fields: dict[str, str | None]) -> list[str]:
    return [name for name, value in fields.items() if not value or not value.strip()]


class EmergencyRequestService:
    """Validate and record emergency callback requests."""

    def __init__(
        self,
        repo: "IEmergencyRequestRepository",
        catalog: "ICatalog",
        service_areas: "ServiceAreaService",
        tracking: "TrackingService",
        phone: str,
        email: str,
    ) -> None:
        self.repo = repo
        self.catalog = catalog
        self.service_areas = service_areas
        self.tracking = tracking
        self.phone = phone
        self.email = email

    def submit(self, data: EmergencyRequestCreate) -> EmergencyRequestResult:
        """Record a request after validating required fields, service and postcode.

        Raises:
            ValidationException: Missing fields or unknown service.
            OutsideServiceAreaException: Postcode given but not covered.
        """
        missing = _missing({"name": data.name, "phone": data.phone, "service": data.service})
        if missing:
            raise ValidationException(
                f"Missing required fields: {', '.join(missing)}", field=missing[0]
            )
        if self.catalog.get(CatalogKind.SERVICE, data.service) is None:
            raise ValidationException("Invalid service type", field="service")
        if data.postcode and not self.service_areas.is_serviced(data.postcode):
            raise OutsideServiceAreaException(data.postcode, self.phone, self.email)

        result = self.repo.add(generate_emergency_request_id(), data)
        logger.info("Emergency request %s received for %s", result.id, result.service)
        self.tracking.track_emergency_contact("form", data.postcode or "emergency-api")
        return result


class ContactService:
    """Validate and record contact form submissions."""

    def __init__(self, repo: "IContactRepository", tracking: "TrackingService") -> None:
        self.repo = repo
        self.tracking = tracking

    def submit(self, data: ContactSubmissionCreate) -> ContactSubmissionResult:
        """Record a submission.

        Raises:
            ValidationException: If name, email or message is missing.
        """
        missing = _missing({"name": data.name, "email": data.email, "message": data.message})
        if missing:
            self.tracking.track_form_submission("contact", success=False)
            raise ValidationException("Missing required fields", field=missing[0])
        result = self.repo.add(generate_cuid(), data)
        logger.info("Contact submission %s received", result.id)
        self.tracking.track_form_submission("contact", success=True)
        if data.is_emergency:
            self.tracking.track_emergency_contact("form", "contact-form")
        return result
