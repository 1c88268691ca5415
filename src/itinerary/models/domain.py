"""Domain models for places of interest and travel modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

Coordinate = tuple[float, float]
"""A ``(latitude, longitude)`` pair in decimal degrees."""


class TravelMode(str, Enum):
    """Closed set of supported travel modes."""

    DRIVING = "driving"
    CYCLING = "cycling"
    WALKING = "walking"


# Routing-profile tokens sent by map clients.
MODE_ALIASES: dict[str, TravelMode] = {
    "driving-car": TravelMode.DRIVING,
    "cycling-regular": TravelMode.CYCLING,
    "foot-walking": TravelMode.WALKING,
}


@dataclass(frozen=True, slots=True)
class Point:
    """Represents a named location the traveler may visit."""

    id: Optional[str]
    name: str
    latitude: float
    longitude: float
    category: Optional[str] = None
    description: Optional[str] = None

    @property
    def coordinate(self) -> Coordinate:
        return (self.latitude, self.longitude)
