"""Safe conversions between text, native paths and native environment strings."""

from ._types import EnvString, NativePath
from .convert import (
    NATIVE_ENCODING,
    REPLACEMENT_CHARACTER,
    env_string_to_native_path,
    env_string_to_text,
    native_path_to_env_string,
    native_path_to_text,
    text_to_env_string,
    text_to_native_path,
    to_text_exact,
)

__version__ = "0.1.0"

__all__ = [
    "NativePath",
    "EnvString",
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
