"""Domain exceptions for the restoration site.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class SiteException(Exception):
    """Base exception for all site application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(SiteException):
    """Raised when input validation fails (e.g. missing query, bad postcode)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class FeatureDisabledException(SiteException):
    """Raised when an endpoint exists but is switched off in this environment."""

    def __init__(self, message: str = "Not available") -> None:
        super().__init__(message, "FEATURE_DISABLED")

class ResourceNotFoundException(SiteException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'service', 'location').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ServiceAreaNotFoundException(SiteException):
    """Raised when no service area covers a postcode."""

    def __init__(self, postcode: str) -> None:
        super().__init__(
            "No service areas found for this postcode",
            "SERVICE_AREA_NOT_FOUND",
            {"postcode": postcode},
        )


class OutsideServiceAreaException(SiteException):
    """Raised when an intake request names a postcode outside coverage."""

    def __init__(self, postcode: str, phone: str, email: str) -> None:
        """Initialize with the postcode and the contact details to offer instead.

        Args:
            postcode: Postcode that is not covered.
            phone: Business phone number for manual follow-up.
            email: Business email for manual follow-up.
        """
        super().__init__(
            "Sorry, we do not currently service this area. "
            "Please contact us for more information.",
            "OUTSIDE_SERVICE_AREA",
            {"postcode": postcode, "contact": {"phone": phone, "email": email}},
        )


class ServiceUnavailableException(SiteException):
    """Raised when a backing component (e.g. cache) cannot serve the request."""

    def __init__(self, message: str = "Service temporarily unavailable") -> None:
        super().__init__(message, "SERVICE_UNAVAILABLE")
