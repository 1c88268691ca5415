"""Serializers for routing outputs."""

from __future__ import annotations

import csv
import io

from ..routing.models import Route
from .formatter import step_display_instruction


def route_to_json(route: Route) -> dict:
    return {
        "distance": route.distance_km,
        "duration": route.duration_min,
        "steps": [
            {
                "instruction": step.instruction,
                "display_instruction": step_display_instruction(step),
                "distance": step.distance_m,
                "duration": step.duration_min,
                "start_location": list(step.start_location),
                "end_location": list(step.end_location),
                "from_place": step.from_place,
                "to_place": step.to_place,
            }
            for step in route.steps
        ],
        "coordinates": [list(coordinate) for coordinate in route.coordinates],
    }


def route_steps_to_csv(route: Route) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "from_place",
        "to_place",
        "instruction",
        "distance_m",
        "duration_min",
        "start_lat",
        "start_lon",
        "end_lat",
        "end_lon",
        "total_distance_km",
        "total_duration_min",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for sequence, step in enumerate(route.steps, start=1):
        writer.writerow(
            {
                "sequence": sequence,
                "from_place": step.from_place,
                "to_place": step.to_place,
                "instruction": step.instruction,
                "distance_m": step.distance_m,
                "duration_min": step.duration_min,
                "start_lat": step.start_location[0],
                "start_lon": step.start_location[1],
                "end_lat": step.end_location[0],
                "end_lon": step.end_location[1],
                "total_distance_km": route.distance_km,
                "total_duration_min": route.duration_min,
            }
        )
    return buffer.getvalue()
