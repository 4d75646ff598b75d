"""Presentation-layer dependency injection (composition root).

Use cases are assembled per request from the per-application objects that
init_app_state() placed on app.state (catalog, result cache, repositories,
tracking). Routes depend only on these functions, never on app.state.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from drq_site.application.services.relevance_search import RelevanceSearch
from drq_site.application.services.tracking_service import TrackingService
from drq_site.application.use_cases import (
    AnalyticsService,
    ContactService,
    EmergencyRequestService,
    SearchService,
    ServiceAreaService,
)
from drq_site.core.config import Settings, get_settings
from drq_site.infrastructure.cache.memory_cache import ResultCache
from drq_site.infrastructure.catalog import StaticCatalog


def get_catalog(request: Request) -> StaticCatalog:
    return request.app.state.catalog


def get_result_cache(request: Request) -> ResultCache:
    return request.app.state.cache


def get_tracking(request: Request) -> TrackingService:
    return request.app.state.tracking


def get_search_service(
    catalog: Annotated[StaticCatalog, Depends(get_catalog)],
    cache: Annotated[ResultCache, Depends(get_result_cache)],
    tracking: Annotated[TrackingService, Depends(get_tracking)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchService:
    return SearchService(
        RelevanceSearch(catalog), cache, tracking, ttl=settings.cache_ttl_search
    )


def get_service_area_service(
    request: Request,
    cache: Annotated[ResultCache, Depends(get_result_cache)],
    tracking: Annotated[TrackingService, Depends(get_tracking)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ServiceAreaService:
    return ServiceAreaService(
        request.app.state.service_area_repo,
        cache,
        tracking,
        list_ttl=settings.cache_ttl_service_areas,
        postcode_ttl=settings.cache_ttl_postcode,
    )


def get_emergency_request_service(
    request: Request,
    catalog: Annotated[StaticCatalog, Depends(get_catalog)],
    service_areas: Annotated[ServiceAreaService, Depends(get_service_area_service)],
    tracking: Annotated[TrackingService, Depends(get_tracking)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> EmergencyRequestService:
    return EmergencyRequestService(
        request.app.state.emergency_repo,
        catalog,
        service_areas,
        tracking,
        phone=settings.emergency_phone,
        email=settings.contact_email,
    )


def get_contact_service(
    request: Request,
    tracking: Annotated[TrackingService, Depends(get_tracking)],
) -> ContactService:
    return ContactService(request.app.state.contact_repo, tracking)


def get_analytics_service(
    request: Request,
    tracking: Annotated[TrackingService, Depends(get_tracking)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AnalyticsService:
    return AnalyticsService(
        request.app.state.analytics_repo, tracking, listing_enabled=settings.debug
    )
