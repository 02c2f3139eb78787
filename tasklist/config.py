"""Settings loaded from environment variables.

All variables share the ``TASKLIST_`` prefix. Nothing is required at import
time; unset or malformed values fall back to the defaults.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

ENV_PREFIX = "TASKLIST"

DEFAULT_API_BASE_URL = "http://localhost:8080"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Collaborator API ----
    api_base_url: str
    api_timeout_seconds: float

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    # ---- Web UI ----
    host: str
    port: int


def load_settings() -> Settings:
    """Read a fresh Settings object from the environment."""
    return Settings(
        api_base_url=_env(_k("API_BASE_URL"), DEFAULT_API_BASE_URL).rstrip("/"),
        api_timeout_seconds=_env_float(_k("API_TIMEOUT_SECONDS"), 5.0),
        log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
        log_file=_env_path(_k("LOG_FILE")),
        host=_env(_k("HOST"), "127.0.0.1"),
        port=_env_int(_k("PORT"), 8000),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return load_settings()
