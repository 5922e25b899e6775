# src/terminal_todo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required: every variable has a default.
- Settings are built lazily so tests can patch the environment first.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool
    log_dir: Path

    # ---- Console ----
    prompt: str
    show_banner: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/todo"))

        # Trailing spaces are meaningful in a prompt, so no strip here.
        prompt = _env(_k("PROMPT"), "> ")
        show_banner = _env_bool(_k("SHOW_BANNER"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            log_dir=log_dir,
            prompt=prompt,
            show_banner=show_banner,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading .env on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
