"""Route composition engine exports."""

from .duration import estimate_duration_minutes, parse_mode
from .exceptions import InvalidModeError, MissingOriginError, RoutingError
from .models import ItineraryPlan, Route, RouteStep
from .ordering import order_stops
from .path import sample_path
from .provider import HeuristicRoutingProvider, RoutingProvider, get_provider
from .synthesizer import build_route

__all__ = [
    "build_route",
    "order_stops",
    "sample_path",
    "estimate_duration_minutes",
    "parse_mode",
    "get_provider",
    "RoutingProvider",
    "HeuristicRoutingProvider",
    "Route",
    "RouteStep",
    "ItineraryPlan",
    "RoutingError",
    "InvalidModeError",
    "MissingOriginError",
]
