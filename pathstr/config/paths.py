"""Process-environment lookups that feed the conversion demo."""

from __future__ import annotations

import os
from typing import Optional

from pathstr._types import EnvString, NativePath


def current_dir() -> NativePath:
    """Return the current working directory as a native path.

    Uses the bytes API so undecodable path bytes survive unchanged. Any
    ``OSError`` (for example a removed working directory) propagates.
    """
    return NativePath(os.getcwdb())


def env_var(name: str) -> Optional[EnvString]:
    """Return the native value of environment variable ``name``, or None if unset."""
    if os.supports_bytes_environ:
        raw = os.environb.get(os.fsencode(name))
        return None if raw is None else EnvString(raw)
    value = os.environ.get(name)
    return None if value is None else EnvString.from_os(value)


__all__ = ["current_dir", "env_var"]
