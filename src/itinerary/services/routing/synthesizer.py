"""Route synthesis from an ordered list of stops."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import Coordinate, Point, TravelMode
from ..geospatial import distance_km
from .duration import estimate_duration_minutes, parse_mode
from .models import Route, RouteStep
from .path import sample_path

logger = logging.getLogger(__name__)


def build_route(points: Sequence[Point], mode: TravelMode | str) -> Route:
    """Walk ``points`` pairwise (origin first) and assemble a Route.

    Fewer than two points yields an empty Route. Legs contribute their sampled
    path to one flattened coordinate list; every leg after the first drops its
    first sample, which repeats the previous leg's last one.
    """
    travel_mode = parse_mode(mode)
    if len(points) < 2:
        return Route()

    coordinates: list[Coordinate] = []
    steps: list[RouteStep] = []
    total_distance = 0.0
    total_duration = 0.0

    for i, (origin, destination) in enumerate(zip(points, points[1:])):
        leg_km = distance_km(origin, destination)
        leg_min = estimate_duration_minutes(leg_km, travel_mode)
        total_distance += leg_km
        total_duration += leg_min

        segment = sample_path(origin.coordinate, destination.coordinate)
        coordinates.extend(segment if i == 0 else segment[1:])

        steps.append(
            RouteStep(
                instruction=f"Head to {destination.name}",
                distance_m=round(leg_km * 1000),
                duration_min=round(leg_min),
                start_location=origin.coordinate,
                end_location=destination.coordinate,
                from_place=origin.name,
                to_place=destination.name,
            )
        )
        logger.debug("Leg %d %s -> %s: %.3f km, %.1f min", i + 1, origin.name, destination.name, leg_km, leg_min)

    return Route(
        distance_km=round(total_distance, 1),
        duration_min=round(total_duration),
        steps=tuple(steps),
        coordinates=tuple(coordinates),
    )
