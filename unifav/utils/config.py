"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- Remote directory --------------------------------------------------
    directory_url: str = field(
        default_factory=lambda: os.getenv(
            "DIRECTORY_URL", "http://universities.hipolabs.com/search"
        )
    )
    # None disables the timeout entirely
    http_timeout: Optional[float] = field(default_factory=lambda: _optional_float("HTTP_TIMEOUT"))
    max_criteria_length: int = field(
        default_factory=lambda: int(os.getenv("MAX_CRITERIA_LENGTH", "200"))
    )

    # --- Favorites storage -------------------------------------------------
    storage_backend: str = field(
        default_factory=lambda: os.getenv("STORAGE_BACKEND", "file").lower()
    )
    favorites_key: str = field(
        default_factory=lambda: os.getenv("FAVORITES_KEY", "@favorite_universities")
    )
    favorites_file: str = field(
        default_factory=lambda: os.getenv("FAVORITES_FILE", "data/favorites.json")
    )

    # --- Redis -------------------------------------------------------------
    redis_host: str = field(default_factory=lambda: os.getenv("REDIS_HOST", "localhost"))
    redis_port: int = field(default_factory=lambda: int(os.getenv("REDIS_PORT", "6379")))
    redis_password: str = field(default_factory=lambda: os.getenv("REDIS_PASSWORD", ""))
    redis_db: int = field(default_factory=lambda: int(os.getenv("REDIS_DB", "0")))

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", "logs/unifav.log"))
    analytics_file: str = field(
        default_factory=lambda: os.getenv("ANALYTICS_FILE", "logs/searches.jsonl")
    )


# Module-level singleton -- import this everywhere.
settings = Settings()
