"""Application configuration and settings management."""

from typing import Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ITINERARY_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Itinerary Route Composition API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root logger level applied by create_app().")
    routing_provider: Literal["heuristic"] = Field(
        default="heuristic",
        description="Routing provider used to order stops and synthesize routes.",
    )
    driving_speed_kmh: float = Field(default=40.0, gt=0.0)
    cycling_speed_kmh: float = Field(default=15.0, gt=0.0)
    walking_speed_kmh: float = Field(default=5.0, gt=0.0)
    path_sample_spacing_km: float = Field(
        default=0.5,
        gt=0.0,
        description="Target distance between sampled path points.",
    )
    min_path_steps: int = Field(default=5, ge=1, description="Minimum interpolation steps per leg.")
    origin_label: str = Field(default="Your Location", description="Display name of the traveler's origin.")
    default_start_time: str = Field(default="09:00", pattern=r"^\d{2}:\d{2}$")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
