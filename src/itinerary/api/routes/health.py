"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings
from ...models.domain import Point, TravelMode

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


def _get_provider_factory():
    """Lazy import to avoid startup failures."""
    from ...services.routing.provider import get_provider
    return get_provider


@router.get("/health/engine", status_code=status.HTTP_200_OK)
def health_engine() -> dict:
    """Route a short two-point probe through the configured provider."""
    try:
        provider = _get_provider_factory()(settings.routing_provider)
        probe = [
            Point(id=None, name=settings.origin_label, latitude=0.0, longitude=0.0),
            Point(id="probe", name="Probe", latitude=0.01, longitude=0.0),
        ]
        route = provider.build_route(probe, TravelMode.WALKING)
        return {
            "service": "engine",
            "provider": provider.name,
            "healthy": len(route.steps) == 1 and route.distance_km > 0,
        }
    except Exception as e:
        return {"service": "engine", "provider": settings.routing_provider, "healthy": False, "error": str(e)}
