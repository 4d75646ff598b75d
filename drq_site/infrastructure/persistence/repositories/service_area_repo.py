"""Service area repository backed by compiled-in data (read-only)."""

from __future__ import annotations

from collections.abc import Iterable

from drq_site.application.dtos.service_area import PostcodeRange, ServiceArea
from drq_site.infrastructure.catalog import data


class StaticServiceAreaRepository:
    """Service areas and postcode ranges; immutable after construction."""

    def __init__(
        self,
        areas: Iterable[ServiceArea] | None = None,
        ranges: Iterable[PostcodeRange] | None = None,
    ) -> None:
        self._areas = tuple(
            areas if areas is not None else (ServiceArea(**a) for a in data.SERVICE_AREAS)
        )
        self._ranges = tuple(
            ranges
            if ranges is not None
            else (PostcodeRange(area, start, end) for area, start, end in data.POSTCODE_RANGES)
        )

    def list_all(self) -> list[ServiceArea]:
        return list(self._areas)

    def find_by_postcode(self, postcode: str) -> list[ServiceArea]:
        return [a for a in self._areas if a.postcode == postcode]

    def postcode_ranges(self) -> list[PostcodeRange]:
        return list(self._ranges)
