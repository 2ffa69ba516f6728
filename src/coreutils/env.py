from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv
import logging
import os

load_dotenv()  # take environment variables from .env

DEFAULT_PROGRAMS_URL = "http://data.cityofnewyork.us/resource/uvks-tn5n.json"


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def env_float(key: str, default: float | None = None) -> float | None:
    """Get environment variable as a float, empty values count as unset."""
    value = env_get(key)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"{key} must be a number, got {value!r}") from e


def env_log_level(key: str, default: str = "INFO") -> str:
    """Get a logging level name, unknown names fall back to default."""
    value = (env_get(key) or default).strip().upper()
    if not isinstance(logging.getLevelName(value), int):
        return default
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime settings, fixed once loaded"""

    programs_url: str = DEFAULT_PROGRAMS_URL
    timeout: Optional[float] = None
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from the environment (and .env)"""
    return Settings(
        programs_url=env_get("NYC_PROGRAMS_URL") or DEFAULT_PROGRAMS_URL,
        timeout=env_float("NYC_HTTP_TIMEOUT"),
        log_level=env_log_level("NYC_LOG_LEVEL"),
    )
