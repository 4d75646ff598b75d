"""Tests for domain exceptions (error_code, message, details)."""

from drq_site.domain.exceptions import (
    OutsideServiceAreaException,
    ResourceNotFoundException,
    ServiceAreaNotFoundException,
    ServiceUnavailableException,
    SiteException,
    ValidationException,
)


def test_site_exception_default_error_code() -> None:
    """Base SiteException uses class name as error_code when not provided."""
    exc = SiteException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "SiteException"
    assert exc.details == {}


def test_site_exception_to_dict() -> None:
    exc = SiteException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception() -> None:
    exc = ValidationException("Postcode must be 4 digits", field="postcode")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "postcode"}


def test_validation_exception_without_field() -> None:
    assert ValidationException("Invalid").details == {}


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("service", "asbestos")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert "asbestos" in exc.message
    assert exc.details == {"resource_type": "service", "resource_id": "asbestos"}


def test_service_area_not_found() -> None:
    exc = ServiceAreaNotFoundException("9999")
    assert exc.error_code == "SERVICE_AREA_NOT_FOUND"
    assert exc.message == "No service areas found for this postcode"
    assert exc.details == {"postcode": "9999"}


def test_outside_service_area_carries_contact() -> None:
    exc = OutsideServiceAreaException("2000", "1300 309 361", "a@b.au")
    assert exc.error_code == "OUTSIDE_SERVICE_AREA"
    assert exc.details["contact"] == {"phone": "1300 309 361", "email": "a@b.au"}


def test_service_unavailable_default_message() -> None:
    exc = ServiceUnavailableException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert exc.message == "Service temporarily unavailable"


def test_all_are_site_exceptions() -> None:
    assert isinstance(ValidationException("x"), SiteException)
    assert isinstance(ServiceAreaNotFoundException("1"), SiteException)
