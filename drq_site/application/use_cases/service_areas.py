"""Service area use cases: cached listing, postcode lookup, coverage check."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from drq_site.application.dtos.service_area import PostcodeCoverage, PostcodeRange, ServiceArea
from drq_site.core.constants import POSTCODE_PATTERN
from drq_site.domain.exceptions import ServiceAreaNotFoundException, ValidationException
from drq_site.infrastructure.cache.keys import (
    service_areas_all_key,
    service_areas_postcode_key,
)

if TYPE_CHECKING:
    from drq_site.application.interfaces.repositories import IServiceAreaRepository
    from drq_site.application.interfaces.services import IResultCache
    from drq_site.application.services.tracking_service import TrackingService

_POSTCODE_RE = re.compile(POSTCODE_PATTERN)

SERVICE_AREA_CACHE_NAMESPACE = "service-area"


def validate_postcode(postcode: object) -> str:
    """Return the postcode if it is a string of exactly four digits.

    Raises:
        ValidationException: If missing or malformed (non-strings included).
    """
    if postcode is None or postcode == "":
        raise ValidationException("Postcode is required", field="postcode")
    if not isinstance(postcode, str) or not _POSTCODE_RE.fullmatch(postcode):
        raise ValidationException("Postcode must be 4 digits", field="postcode")
    return postcode


class ServiceAreaService:
    """Service-area reads through the result cache."""

    def __init__(
        self,
        repo: "IServiceAreaRepository",
        cache: "IResultCache",
        tracking: "TrackingService",
        list_ttl: float = 24 * 60 * 60,
        postcode_ttl: float = 12 * 60 * 60,
    ) -> None:
        self.repo = repo
        self.cache = cache
        self.tracking = tracking
        self.list_ttl = list_ttl
        self.postcode_ttl = postcode_ttl

    def list_areas(self) -> list[ServiceArea]:
        """All service areas (cached for list_ttl)."""
        areas, _ = self.cache.get_or_compute(
            service_areas_all_key(),
            self.repo.list_all,
            ttl=self.list_ttl,
            namespace=SERVICE_AREA_CACHE_NAMESPACE,
        )
        return areas

    def find_by_postcode(self, postcode: object) -> list[ServiceArea]:
        """Service areas whose postcode matches exactly (cached per postcode).

        Raises:
            ValidationException: If the postcode is missing or malformed.
            ServiceAreaNotFoundException: If no area matches.
        """
        postcode = validate_postcode(postcode)
        areas, _ = self.cache.get_or_compute(
            service_areas_postcode_key(postcode),
            lambda: self.repo.find_by_postcode(postcode),
            ttl=self.postcode_ttl,
            namespace=SERVICE_AREA_CACHE_NAMESPACE,
        )
        self.tracking.track_service_area(postcode, bool(areas))
        if not areas:
            raise ServiceAreaNotFoundException(postcode)
        return areas

    def check_coverage(self, postcode: object) -> PostcodeCoverage:
        """Whether any covered postcode range contains the postcode.

        Raises:
            ValidationException: If the postcode is missing or malformed.
        """
        postcode = validate_postcode(postcode)
        areas = [r.area for r in self.repo.postcode_ranges() if r.contains(postcode)]
        return PostcodeCoverage(postcode=postcode, is_serviced=bool(areas), areas=areas)

    def is_serviced(self, postcode: str) -> bool:
        """True for a well-formed postcode inside any covered range."""
        if not _POSTCODE_RE.fullmatch(postcode):
            return False
        return any(r.contains(postcode) for r in self.repo.postcode_ranges())

    def regions(self) -> list[PostcodeRange]:
        """Covered regions with their postcode ranges, in declaration order."""
        return self.repo.postcode_ranges()

    def find_region(self, postcode: object) -> PostcodeRange | None:
        """First covered region whose range contains the postcode, or None.

        Raises:
            ValidationException: If the postcode is missing or malformed.
        """
        postcode = validate_postcode(postcode)
        region = next((r for r in self.repo.postcode_ranges() if r.contains(postcode)), None)
        self.tracking.track_service_area(postcode, region is not None)
        return region
