"""Home-directory redaction for logged and displayed paths."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Pattern, Union

from pathstr._types import EnvString, NativePath

REDACTED = "[REDACTED]"


class DataRedactor:
    """Mask user home directories in strings, paths and nested log data."""

    def __init__(
        self,
        home: Optional[Union[str, Path]] = None,
        custom_patterns: Optional[List[Pattern[str]]] = None,
    ) -> None:
        """Initialize redactor.

        Args:
            home: Home directory to mask explicitly (default: ``Path.home()`` when resolvable)
            custom_patterns: Additional regex patterns to redact
        """
        self.patterns: List[Pattern[str]] = []

        if home is None:
            try:
                home = Path.home()
            except RuntimeError:
                home = None
        if home is not None and str(home) not in ("", os.sep):
            self.patterns.append(re.compile(re.escape(str(home)) + r"(?=[/\\]|$)"))

        self.patterns.extend(
            [
                re.compile(r"/home/[^/\s]+"),
                re.compile(r"/Users/[^/\s]+"),
                re.compile(r"[A-Za-z]:\\Users\\[^\\\s]+"),
            ]
        )

        if custom_patterns:
            self.patterns.extend(custom_patterns)

    def redact_string(self, text: str) -> str:
        """Replace every home-directory prefix in ``text`` with ``[REDACTED]``."""
        result = text
        for pattern in self.patterns:
            result = pattern.sub(REDACTED, result)
        return result

    def redact_path(self, path: Union[str, Path, NativePath]) -> str:
        # NativePath goes through fspath so undecodable bytes stay escaped
        return self.redact_string(os.fspath(path))

    def redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_dict(value)
        if isinstance(value, (list, tuple)):
            return [self.redact_value(item) for item in value]
        if isinstance(value, str):
            return self.redact_string(value)
        if isinstance(value, (Path, NativePath)):
            return self.redact_path(value)
        if isinstance(value, EnvString):
            return self.redact_string(value.as_os_str())
        return value

    def redact_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively redact values of ``data``; keys are left alone."""
        return {key: self.redact_value(value) for key, value in data.items()}

    def add_pattern(self, pattern: Union[str, Pattern[str]]) -> None:
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        self.patterns.append(pattern)
