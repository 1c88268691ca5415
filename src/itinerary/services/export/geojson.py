"""GeoJSON export of composed routes for map clients."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from shapely.geometry import LineString, Point as ShapelyPoint, mapping

from ...models.domain import Coordinate, Point
from ..routing.models import Route


def linestring_to_wkt(coordinates: Sequence[Coordinate]) -> str:
    """Convert linestring coordinates to WKT format.

    Args:
        coordinates: Sequence of (lat, lon) pairs

    Returns:
        WKT LINESTRING string
    """
    if not coordinates or len(coordinates) < 2:
        raise ValueError("LineString must have at least 2 coordinates")

    # WKT uses lon,lat order (x,y)
    coord_pairs = [f"{lon} {lat}" for lat, lon in coordinates]
    return f"LINESTRING({','.join(coord_pairs)})"


def _geometry(shape: Any) -> Dict[str, Any]:
    geometry = mapping(shape)
    coordinates = geometry["coordinates"]
    if geometry["type"] == "Point":
        return {"type": "Point", "coordinates": list(coordinates)}
    return {"type": geometry["type"], "coordinates": [list(pair) for pair in coordinates]}


def route_to_geojson(route: Route, stops: Sequence[Point], mode: str) -> Dict[str, Any]:
    """Build a FeatureCollection with the route path and one feature per stop.

    Args:
        route: Composed route
        stops: Ordered stops, origin first
        mode: Travel mode the route was composed for

    Returns:
        GeoJSON FeatureCollection (coordinates in lon, lat order)
    """
    features: List[Dict[str, Any]] = []

    if len(route.coordinates) >= 2:
        line = LineString([(lon, lat) for lat, lon in route.coordinates])
        features.append(
            {
                "type": "Feature",
                "geometry": _geometry(line),
                "properties": {
                    "kind": "route",
                    "mode": mode,
                    "distance_km": route.distance_km,
                    "duration_min": route.duration_min,
                    "wkt": linestring_to_wkt(route.coordinates),
                },
            }
        )

    for sequence, stop in enumerate(stops):
        features.append(
            {
                "type": "Feature",
                "geometry": _geometry(ShapelyPoint(stop.longitude, stop.latitude)),
                "properties": {
                    "kind": "origin" if sequence == 0 else "stop",
                    "sequence": sequence,
                    "id": stop.id,
                    "name": stop.name,
                    "category": stop.category,
                },
            }
        )

    return {"type": "FeatureCollection", "features": features}
