"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - playlist_max_songs is always >= 1

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: `moodtunes` runs with an empty environment
    - CORS open to every origin by default: the catalog is public and read-only
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"  # nosec B104 — container deployment
    port: int = 3000

    # API
    cors_origins: list[str] = ["*"]

    # Playlists
    playlist_max_songs: int = Field(8, ge=1)
    shuffle_enabled: bool = True
    shuffle_seed: int | None = None

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
