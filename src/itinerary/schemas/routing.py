"""Itinerary request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class LocationModel(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class PlaceModel(BaseModel):
    id: str
    name: str
    location: LocationModel
    category: Optional[str] = None
    description: Optional[str] = None


def _check_origin(value: Optional[Tuple[float, float]]) -> Optional[Tuple[float, float]]:
    if value is None:
        return value
    lat, lon = value
    if not -90 <= lat <= 90 or not -180 <= lon <= 180:
        raise ValueError(f"Origin ({lat}, {lon}) is outside valid latitude/longitude bounds.")
    return value


def _check_unique_ids(places: List[PlaceModel]) -> List[PlaceModel]:
    seen: set[str] = set()
    for place in places:
        if place.id in seen:
            raise ValueError(f"Duplicate place id '{place.id}' in request.")
        seen.add(place.id)
    return places


class OrderRequest(BaseModel):
    origin: Optional[Tuple[float, float]] = Field(
        default=None,
        description="Traveler's current location as [lat, lon]. Without it no ordering is possible.",
    )
    places: List[PlaceModel] = Field(default_factory=list)

    @field_validator("origin")
    @classmethod
    def _validate_origin(cls, value: Optional[Tuple[float, float]]) -> Optional[Tuple[float, float]]:
        return _check_origin(value)

    @field_validator("places")
    @classmethod
    def _validate_places(cls, value: List[PlaceModel]) -> List[PlaceModel]:
        return _check_unique_ids(value)


class ItineraryRequest(OrderRequest):
    mode: str = Field(
        default="driving",
        description="Travel mode: driving, cycling or walking (routing-profile aliases accepted).",
    )
    optimize: bool = Field(
        default=False,
        description="Reorder places nearest-first from the origin. If False, the given order is used verbatim.",
    )
    start_time: Optional[str] = Field(
        default=None,
        pattern=r"^([01]\d|2[0-3]):[0-5]\d$",
        description="Departure time as HH:MM, used for the arrival estimate.",
    )


class RouteStepModel(BaseModel):
    instruction: str
    display_instruction: str
    distance: int
    duration: int
    start_location: Tuple[float, float]
    end_location: Tuple[float, float]
    from_place: str
    to_place: str


class RouteModel(BaseModel):
    distance: float
    duration: int
    steps: List[RouteStepModel]
    coordinates: List[Tuple[float, float]]


class RouteSummaryModel(BaseModel):
    stop_count: int
    distance_text: str
    duration_text: str
    start_time: str
    arrival_time: str


class ItineraryResponse(BaseModel):
    status: Literal["ok", "empty", "no_route"]
    mode: str
    ordered_places: List[PlaceModel]
    route: Optional[RouteModel] = None
    summary: Optional[RouteSummaryModel] = None


class OrderResponse(BaseModel):
    ordered_ids: List[str]
    places: List[PlaceModel]
