"""Conversions between text, native paths and native environment strings.

Text is a plain ``str``. ``NativePath`` and ``EnvString`` hold OS-native bytes
that are allowed to be invalid text, so the conversions split into two kinds:

- text -> native: lossless. The str is encoded as-is and never validated.
- native -> text: lossy-safe. Valid bytes decode exactly; every invalid
  subsequence becomes U+FFFD. These never raise.

Path <-> environment string is a pure re-wrap of the same bytes.

All functions are pure: they read no settings, environment or shared state.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ._types import EnvString, NativePath

logger = logging.getLogger(__name__)

NATIVE_ENCODING = "utf-8"
REPLACEMENT_CHARACTER = "\ufffd"

# surrogatepass lets any str encode, including lone surrogates
_ENCODE_ERRORS = "surrogatepass"


def _encode(text: str) -> bytes:
    return text.encode(NATIVE_ENCODING, _ENCODE_ERRORS)


def _decode_lossy(raw: bytes, role: str) -> str:
    try:
        return raw.decode(NATIVE_ENCODING)
    except UnicodeDecodeError:
        text = raw.decode(NATIVE_ENCODING, errors="replace")
        # sentinels already present in the input are not substitutions
        replaced = text.count(REPLACEMENT_CHARACTER) - raw.count(_encode(REPLACEMENT_CHARACTER))
        logger.debug("lossy %s decode: %d replacement character(s) substituted", role, replaced)
        return text


def native_path_to_text(path: NativePath) -> str:
    """Return the text form of ``path``, substituting U+FFFD for invalid bytes."""
    return _decode_lossy(path.raw, "path")


def text_to_native_path(text: str) -> NativePath:
    return NativePath(_encode(text))


def native_path_to_env_string(path: NativePath) -> EnvString:
    return EnvString(path.raw)


def env_string_to_native_path(value: EnvString) -> NativePath:
    return NativePath(value.raw)


def env_string_to_text(value: EnvString) -> str:
    """Return the text form of ``value``, substituting U+FFFD for invalid bytes."""
    return _decode_lossy(value.raw, "env string")


def text_to_env_string(text: str) -> EnvString:
    return EnvString(_encode(text))


def to_text_exact(value: Union[NativePath, EnvString]) -> Optional[str]:
    """Return the text form of ``value`` only if it is valid text, else None."""
    try:
        return value.raw.decode(NATIVE_ENCODING)
    except UnicodeDecodeError:
        return None


__all__ = [
    "NATIVE_ENCODING",
    "REPLACEMENT_CHARACTER",
    "native_path_to_text",
    "text_to_native_path",
    "native_path_to_env_string",
    "env_string_to_native_path",
    "env_string_to_text",
    "text_to_env_string",
    "to_text_exact",
]
