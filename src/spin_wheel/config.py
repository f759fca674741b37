"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    seed_defaults: bool = True
    default_segment_labels: str | None = None
    min_segments: int = 2
    max_segments: int = 12
    enforce_segment_limits: bool = False

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_segment_labels(raw: str | None) -> list[str] | None:
    """Parse comma-separated default segment labels from env."""
    if raw is None:
        return None
    labels = [chunk.strip() for chunk in raw.split(",")]
    return [label for label in labels if label] or None
