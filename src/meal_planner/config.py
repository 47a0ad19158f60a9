"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    default_activity: float = 1.375
    cooking_yield_overrides: str | None = None

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_yield_overrides(raw: str | None) -> dict[str, float]:
    """Parse cooking yield overrides such as ``fried=0.65,boiled=0.75``."""
    if raw is None:
        return {}
    overrides: dict[str, float] = {}
    for chunk in raw.split(","):
        method, sep, value = chunk.partition("=")
        method = method.strip().lower()
        if not sep or not method:
            continue
        try:
            ratio = float(value.strip())
        except ValueError:
            continue
        if ratio > 0:
            overrides[method] = ratio
    return overrides
