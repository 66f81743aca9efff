"""Configuration management for tagmark."""

import os

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel


def _load_env() -> dict:
    """
    Read settings variables without touching os.environ.

    Values from a .env file in the working directory are overridden by the
    real environment.
    """
    return {**dotenv_values(find_dotenv(usecwd=True)), **os.environ}


_ENV = _load_env()


def _parse_bool(name: str, default: bool, env=None) -> bool:
    """Parse a boolean flag from the environment."""
    value = (_ENV if env is None else env).get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Library settings."""

    # Log a warning when a placeholder key is superseded by a later placeholder
    warn_duplicate_keys: bool = _parse_bool("TAGMARK_WARN_DUPLICATE_KEYS", False)


settings = Settings()
