"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

from ...models.domain import Coordinate, Point, TravelMode


@dataclass(frozen=True, slots=True)
class RouteStep:
    instruction: str
    distance_m: int
    duration_min: int
    start_location: Coordinate
    end_location: Coordinate
    from_place: str
    to_place: str


@dataclass(frozen=True, slots=True)
class Route:
    distance_km: float = 0.0
    duration_min: int = 0
    steps: Tuple[RouteStep, ...] = field(default_factory=tuple)
    coordinates: Tuple[Coordinate, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.steps


@dataclass(frozen=True, slots=True)
class ItineraryPlan:
    """Outcome of one planning request: status, visiting order and route."""

    status: Literal["ok", "empty", "no_route"]
    mode: TravelMode
    origin: Optional[Point] = None
    stops: Tuple[Point, ...] = field(default_factory=tuple)
    route: Optional[Route] = None
