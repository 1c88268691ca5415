"""Human-readable formatting of route figures."""

from __future__ import annotations

from datetime import datetime, timedelta

from ...config import settings
from ..routing.models import RouteStep


def format_distance(meters: float) -> str:
    if meters >= 1000:
        return f"{meters / 1000:.1f} km"
    return f"{round(meters)} m"


def format_duration(minutes: float) -> str:
    if minutes < 60:
        return f"{round(minutes)} min"
    hours = int(minutes // 60)
    mins = round(minutes % 60)
    return f"{hours} h {mins} min"


def estimate_arrival_time(start_time: str, duration_minutes: float) -> str:
    """Clock time (HH:MM) reached after ``duration_minutes`` from ``start_time``; wraps at midnight."""
    start = datetime.strptime(start_time, "%H:%M")
    return (start + timedelta(minutes=duration_minutes)).strftime("%H:%M")


def step_display_instruction(step: RouteStep) -> str:
    if step.from_place == settings.origin_label:
        return f"Start from {settings.origin_label}"
    return step.instruction
