"""Settings loaded from environment variables (+ optional .env).

``PORT`` keeps its conventional unprefixed name so hosting platforms can set
it; everything else uses the ``TASK_NOTES_`` prefix.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASK_NOTES"
DEFAULT_PORT = 5000


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    seed_welcome: bool = True

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        """Read settings from the environment, loading ``.env`` first if asked."""
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            host=_env(_k("HOST"), "0.0.0.0"),
            port=_env_int("PORT", DEFAULT_PORT),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            cors_origins=_env_list(_k("CORS_ORIGINS"), ["*"]),
            seed_welcome=_env_bool(_k("SEED_WELCOME"), True),
        )
