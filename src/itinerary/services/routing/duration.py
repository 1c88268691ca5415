"""Travel-mode speed model used to turn distances into durations."""

from __future__ import annotations

from ...config import settings
from ...models.domain import MODE_ALIASES, TravelMode
from .exceptions import InvalidModeError


def parse_mode(value: TravelMode | str) -> TravelMode:
    """Resolve a mode token (or alias) to a TravelMode, rejecting anything else."""
    if isinstance(value, TravelMode):
        return value
    if isinstance(value, str):
        token = value.strip().lower()
        if token in MODE_ALIASES:
            return MODE_ALIASES[token]
        try:
            return TravelMode(token)
        except ValueError:
            pass
    raise InvalidModeError(value)


def speed_kmh(mode: TravelMode | str) -> float:
    match parse_mode(mode):
        case TravelMode.DRIVING:
            return settings.driving_speed_kmh
        case TravelMode.CYCLING:
            return settings.cycling_speed_kmh
        case TravelMode.WALKING:
            return settings.walking_speed_kmh


def estimate_duration_minutes(distance_km: float, mode: TravelMode | str) -> float:
    return distance_km / speed_kmh(mode) * 60.0
