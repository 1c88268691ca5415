"""Itinerary orchestration service."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from ...config import settings
from ...models.domain import Point
from ...schemas.routing import (
    ItineraryRequest,
    ItineraryResponse,
    LocationModel,
    OrderRequest,
    OrderResponse,
    PlaceModel,
    RouteModel,
    RouteSummaryModel,
)
from ..export.geojson import route_to_geojson
from ..outputs.formatter import estimate_arrival_time, format_distance, format_duration
from ..outputs.routing_formatter import route_steps_to_csv, route_to_json
from .duration import parse_mode
from .exceptions import MissingOriginError
from .models import ItineraryPlan, Route
from .provider import RoutingProvider, get_provider

logger = logging.getLogger(__name__)


def _to_point(place: PlaceModel) -> Point:
    return Point(
        id=place.id,
        name=place.name,
        latitude=place.location.lat,
        longitude=place.location.lon,
        category=place.category,
        description=place.description,
    )


def _to_place_model(point: Point) -> PlaceModel:
    return PlaceModel(
        id=point.id or "",
        name=point.name,
        location=LocationModel(lat=point.latitude, lon=point.longitude),
        category=point.category,
        description=point.description,
    )


def _origin_point(origin: Optional[Tuple[float, float]]) -> Optional[Point]:
    if origin is None:
        return None
    lat, lon = origin
    return Point(id=None, name=settings.origin_label, latitude=lat, longitude=lon)


def _resolve_provider(provider: RoutingProvider | None) -> RoutingProvider:
    return provider or get_provider(settings.routing_provider)


def compose_itinerary(payload: ItineraryRequest, provider: RoutingProvider | None = None) -> ItineraryPlan:
    """Order the requested places (when asked to) and route through them from the origin."""
    mode = parse_mode(payload.mode)
    places = [_to_point(place) for place in payload.places]
    origin = _origin_point(payload.origin)

    if origin is None:
        logger.warning("No origin supplied; skipping ordering and route synthesis for %d places", len(places))
        return ItineraryPlan(status="no_route", mode=mode, stops=tuple(places))

    if not places:
        logger.warning("Itinerary requested with no places selected")
        return ItineraryPlan(status="empty", mode=mode, origin=origin, route=Route())

    router = _resolve_provider(provider)
    stops = router.order_stops(origin, places) if payload.optimize else places
    route = router.build_route([origin, *stops], mode)

    logger.info(
        "Composed %s itinerary via %s provider: %d stops, %.1f km, %d min (optimized=%s)",
        mode.value,
        router.name,
        len(stops),
        route.distance_km,
        route.duration_min,
        payload.optimize,
    )
    return ItineraryPlan(status="ok", mode=mode, origin=origin, stops=tuple(stops), route=route)


def _summary(route: Route, stop_count: int, start_time: str) -> RouteSummaryModel:
    return RouteSummaryModel(
        stop_count=stop_count,
        distance_text=format_distance(route.distance_km * 1000),
        duration_text=format_duration(route.duration_min),
        start_time=start_time,
        arrival_time=estimate_arrival_time(start_time, route.duration_min),
    )


def plan_itinerary(payload: ItineraryRequest, provider: RoutingProvider | None = None) -> ItineraryResponse:
    plan = compose_itinerary(payload, provider)
    ordered_places = [_to_place_model(stop) for stop in plan.stops]

    if plan.route is None:
        return ItineraryResponse(status=plan.status, mode=plan.mode.value, ordered_places=ordered_places)

    start_time = payload.start_time or settings.default_start_time
    return ItineraryResponse(
        status=plan.status,
        mode=plan.mode.value,
        ordered_places=ordered_places,
        route=RouteModel(**route_to_json(plan.route)),
        summary=_summary(plan.route, len(plan.stops), start_time),
    )


def order_places(payload: OrderRequest, provider: RoutingProvider | None = None) -> OrderResponse:
    origin = _origin_point(payload.origin)
    if origin is None:
        raise MissingOriginError("stop ordering")

    ordered = _resolve_provider(provider).order_stops(origin, [_to_point(place) for place in payload.places])
    return OrderResponse(
        ordered_ids=[stop.id or "" for stop in ordered],
        places=[_to_place_model(stop) for stop in ordered],
    )


def itinerary_geojson(payload: ItineraryRequest, provider: RoutingProvider | None = None) -> dict:
    plan = compose_itinerary(payload, provider)
    if plan.route is None or plan.origin is None:
        return {"type": "FeatureCollection", "features": []}
    stops: Sequence[Point] = [plan.origin, *plan.stops]
    return route_to_geojson(plan.route, stops, plan.mode.value)


def itinerary_steps_csv(payload: ItineraryRequest, provider: RoutingProvider | None = None) -> str:
    plan = compose_itinerary(payload, provider)
    return route_steps_to_csv(plan.route or Route())
