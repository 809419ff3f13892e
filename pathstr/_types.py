from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

OsInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]

_SEP = os.sep.encode("ascii")
_ALTSEP = os.altsep.encode("ascii") if os.altsep else None


def _coerce_raw(raw: object) -> bytes:
	if isinstance(raw, bytearray):
		return bytes(raw)
	if not isinstance(raw, bytes):
		raise TypeError(f"raw must be bytes, got {type(raw).__name__}")
	return raw


def _is_absolute(raw: bytes) -> bool:
	if raw.startswith(_SEP) or (_ALTSEP is not None and raw.startswith(_ALTSEP)):
		return True
	# drive-prefixed forms only count on Windows
	return os.name == "nt" and len(raw) >= 3 and raw[1:2] == b":" and raw[2:3] in (b"\\", b"/")


def _ends_with_sep(raw: bytes) -> bool:
	return raw.endswith(_SEP) or (_ALTSEP is not None and raw.endswith(_ALTSEP))


@dataclass(frozen=True, slots=True)
class NativePath:
	"""
	Filesystem path held in OS-native byte form.
	The bytes may not be valid text; use pathstr.convert to get a str.
	"""
	raw: bytes = b""

	def __post_init__(self) -> None:
		object.__setattr__(self, "raw", _coerce_raw(self.raw))

	@classmethod
	def new(cls) -> "NativePath":
		return cls()

	@classmethod
	def from_os(cls, value: OsInput) -> "NativePath":
		"""Build from anything the os module accepts as a path, keeping undecodable bytes."""
		return cls(os.fsencode(value))

	def joinpath(self, component: Union["NativePath", OsInput]) -> "NativePath":
		"""Return a new path with ``component`` pushed onto the end.

		An empty path becomes the component, an absolute component replaces the
		path, and otherwise exactly one separator joins the two.
		"""
		other = component.raw if isinstance(component, NativePath) else os.fsencode(component)
		if not self.raw or _is_absolute(other):
			return NativePath(other)
		if not other:
			return self
		if _ends_with_sep(self.raw):
			return NativePath(self.raw + other)
		return NativePath(self.raw + _SEP + other)

	def as_os_path(self) -> str:
		"""Return the str form os APIs expect (surrogate-escaped where needed)."""
		return os.fsdecode(self.raw)

	def __fspath__(self) -> str:
		return self.as_os_path()

	def __bytes__(self) -> bytes:
		return self.raw

	def __len__(self) -> int:
		return len(self.raw)

	def __repr__(self) -> str:
		return f"NativePath({self.raw!r})"


@dataclass(frozen=True, slots=True)
class EnvString:
	"""
	OS-native string buffer (environment values, arguments).
	Deliberately not os.PathLike so it cannot stand in for a path.
	"""
	raw: bytes = b""

	def __post_init__(self) -> None:
		object.__setattr__(self, "raw", _coerce_raw(self.raw))

	@classmethod
	def new(cls) -> "EnvString":
		return cls()

	@classmethod
	def from_os(cls, value: OsInput) -> "EnvString":
		return cls(os.fsencode(value))

	def append(self, other: Union["EnvString", str, bytes]) -> "EnvString":
		"""Return a new buffer with ``other`` concatenated onto the end."""
		tail = other.raw if isinstance(other, EnvString) else os.fsencode(other)
		return EnvString(self.raw + tail)

	def as_os_str(self) -> str:
		return os.fsdecode(self.raw)

	def __bytes__(self) -> bytes:
		return self.raw

	def __len__(self) -> int:
		return len(self.raw)

	def __repr__(self) -> str:
		return f"EnvString({self.raw!r})"
