# src/tasklift/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per migration run.
- Nothing is read from the network or disk at import time except .env.
- The fallback namespace label is configuration, so the core stays source-agnostic.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from . import __version__

ENV_PREFIX = "TASKLIFT"

DEFAULT_SOURCE_NAME = "wunderlist"
DEFAULT_FALLBACK_TEMPLATE = "Migrated from {source}"


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


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def fallback_namespace_label(source_name: str, template: str = DEFAULT_FALLBACK_TEMPLATE) -> str:
    """
    Name of the synthetic namespace that collects lists no folder owns.

    Only the {source} placeholder is substituted; any other braces stay literal.
    """
    return template.replace("{source}", source_name)


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Source ----
    source_name: str
    fallback_namespace_template: str
    strict_references: bool

    # ---- Attachment fetching ----
    fetch_concurrency: int
    fetch_timeout_seconds: float
    user_agent: str

    # ---- Run supervisor ----
    max_attempts: int
    retry_delay_seconds: float

    @property
    def fallback_namespace_name(self) -> str:
        return fallback_namespace_label(self.source_name, self.fallback_namespace_template)

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "tasklift").strip() or "tasklift"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/tasklift"))

        source_name = _env(_k("SOURCE_NAME"), DEFAULT_SOURCE_NAME).strip() or DEFAULT_SOURCE_NAME
        template = _env(_k("FALLBACK_NAMESPACE_TEMPLATE"), DEFAULT_FALLBACK_TEMPLATE)
        strict_references = _env_bool(_k("STRICT_REFERENCES"), True)

        # keep at least one worker, otherwise fetches would never start
        fetch_concurrency = max(1, _env_int(_k("FETCH_CONCURRENCY"), 4))
        fetch_timeout_seconds = max(0.1, _env_float(_k("FETCH_TIMEOUT_SECONDS"), 30.0))
        user_agent = _env(_k("USER_AGENT"), f"tasklift/{__version__}")

        max_attempts = max(1, _env_int(_k("MAX_ATTEMPTS"), 1))
        retry_delay_seconds = max(0.0, _env_float(_k("RETRY_DELAY_SECONDS"), 5.0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            source_name=source_name,
            fallback_namespace_template=template,
            strict_references=strict_references,
            fetch_concurrency=fetch_concurrency,
            fetch_timeout_seconds=fetch_timeout_seconds,
            user_agent=user_agent,
            max_attempts=max_attempts,
            retry_delay_seconds=retry_delay_seconds,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
