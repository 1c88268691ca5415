"""Export services."""

from .geojson import linestring_to_wkt, route_to_geojson

__all__ = ["route_to_geojson", "linestring_to_wkt"]
