"""API router aggregation (mounted at /api in drq_site.main)."""

from fastapi import APIRouter

from drq_site.api.endpoints import (
    analytics,
    areas,
    contact,
    emergency,
    health,
    search,
    service_areas,
    services,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(
    service_areas.router, prefix="/service-areas", tags=["service-areas"]
)
api_router.include_router(areas.router, prefix="/areas", tags=["service-areas"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
api_router.include_router(emergency.router, prefix="/emergency", tags=["intake"])
api_router.include_router(contact.router, prefix="/contact", tags=["intake"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
