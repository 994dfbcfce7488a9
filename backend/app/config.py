"""Environment-driven settings for the API."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = ("http://localhost:5173",)


@dataclass(frozen=True)
class Settings:
    env: str = "dev"
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)

    @property
    def testing(self) -> bool:
        return self.env == "test"


def _env(key: str, default: str) -> str:
    # treat empty env vars as "not set"
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _split_origins(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_CORS_ORIGINS
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or DEFAULT_CORS_ORIGINS


def load_settings() -> Settings:
    """Load .env into the environment, then read settings from it."""
    load_dotenv()

    return Settings(
        env=_env("APP_ENV", "dev"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS")),
    )
