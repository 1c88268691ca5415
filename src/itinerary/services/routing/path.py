"""Straight-line path sampling used to draw legs on a map."""

from __future__ import annotations

import math

from shapely.geometry import LineString

from ...config import settings
from ...models.domain import Coordinate
from ..geospatial import haversine_km


def sample_count(length_km: float) -> int:
    """Number of interpolation steps for a leg of ``length_km``."""
    return max(settings.min_path_steps, math.floor(length_km / settings.path_sample_spacing_km))


def sample_path(start: Coordinate, end: Coordinate) -> list[Coordinate]:
    """Interpolate points from ``start`` to ``end`` (both included, in travel order).

    The path is a visual stand-in for a real road geometry: points are spaced
    linearly along the straight segment between the endpoints.
    """
    length_km = haversine_km(start[0], start[1], end[0], end[1])
    steps = sample_count(length_km)

    if start == end:
        return [start] * (steps + 1)

    # shapely works in (x, y) = (lon, lat)
    line = LineString([(start[1], start[0]), (end[1], end[0])])
    samples: list[Coordinate] = [start]
    for j in range(1, steps):
        point = line.interpolate(j / steps, normalized=True)
        samples.append((point.y, point.x))
    samples.append(end)
    return samples
