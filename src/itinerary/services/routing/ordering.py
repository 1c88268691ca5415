"""Greedy nearest-neighbor ordering of stops.

The tour is built by repeatedly walking to the closest stop not yet visited.
This is an approximation and gives no optimality guarantee; it costs O(n^2)
distance evaluations, which is fine for the tens of stops a traveler picks.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...models.domain import Point
from ..geospatial import distance_km
from .exceptions import MissingOriginError

logger = logging.getLogger(__name__)


def order_stops(origin: Optional[Point], stops: Sequence[Point]) -> list[Point]:
    """Return ``stops`` in nearest-unvisited-next order starting from ``origin``.

    Ties keep the earlier stop from the input. Stops are never copied or
    modified; the result is a permutation of the input.
    """
    if origin is None:
        raise MissingOriginError("stop ordering")

    remaining = list(stops)
    ordered: list[Point] = []
    current = origin

    while remaining:
        # min() keeps the first of equal keys, which gives the input-order tie-break
        closest_idx = min(range(len(remaining)), key=lambda idx: distance_km(current, remaining[idx]))
        current = remaining.pop(closest_idx)
        ordered.append(current)

    logger.debug("Ordered %d stops: %s", len(ordered), [stop.id for stop in ordered])
    return ordered
