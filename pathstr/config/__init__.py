"""pathstr runtime settings.

Settings only drive the demo CLI and logging setup. The conversion functions in
``pathstr.convert`` never read them.

Example:
    >>> from pathstr.config import settings
    >>> settings.log_level
    'WARNING'

Environment Variables:
    PATHSTR_LOG_LEVEL: Root log level for the demo CLI (default: WARNING)
    PATHSTR_LOG_DIR: Directory for structured JSONL logs (default: unset)
    PATHSTR_DEMO_JSON: Emit the demo report as JSON (default: off)
    PATHSTR_DEMO_REDACT: Mask home directories in demo output (default: off)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

_PREFIX = "PATHSTR_"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env(name: str, default: str) -> str:
    """Get environment variable with PATHSTR_* prefix validation."""
    if not name.startswith(_PREFIX):
        raise ValueError(f"Only {_PREFIX}* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_optional(name: str) -> Optional[str]:
    raw = _env(name, "").strip()
    return raw or None


def _env_log_level(name: str, default: str) -> str:
    raw = _env(name, default).strip().upper()
    return raw if raw in LOG_LEVELS else default


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the pathstr demo and logging.

    Defaults are read from the environment when an instance is created, so
    tests can monkeypatch env vars and call ``load_settings()``.
    """

    log_level: str = field(default_factory=lambda: _env_log_level("PATHSTR_LOG_LEVEL", "WARNING"))
    log_dir: Optional[str] = field(default_factory=lambda: _env_optional("PATHSTR_LOG_DIR"))
    demo_json: bool = field(default_factory=lambda: _env_bool("PATHSTR_DEMO_JSON", False))
    demo_redact: bool = field(default_factory=lambda: _env_bool("PATHSTR_DEMO_REDACT", False))


def load_settings() -> Settings:
    """Re-read settings from the current environment."""
    return Settings()


# Module-level instance for convenient access
settings = Settings()

from pathstr.config.paths import current_dir, env_var  # noqa: E402

__all__ = [
    "settings",
    "Settings",
    "load_settings",
    "LOG_LEVELS",
    "current_dir",
    "env_var",
]
