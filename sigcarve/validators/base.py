"""Validator interface and byte-reading helpers shared by format validators."""

from __future__ import annotations

import abc
from typing import Optional

from sigcarve.core import FileKind, Validation


class Validator(abc.ABC):
    """Read-only, side-effect-free format checker.

    ``validate`` inspects a window that starts at the candidate file start
    and returns a :class:`Validation`.
    """

    @abc.abstractmethod
    def validate(self, window: bytes) -> Validation:
        """Inspect ``window`` and decide whether it holds a file."""

    @abc.abstractmethod
    def kind(self) -> FileKind:
        """Kind of file this validator reports."""

    def validate_with_kind(self, window: bytes) -> tuple[Validation, FileKind]:
        """Validate and report the (possibly refined) file kind."""
        return self.validate(window), self.kind()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _read(buf: bytes, off: int, size: int, order: str) -> Optional[int]:
    if off < 0 or off + size > len(buf):
        return None
    return int.from_bytes(buf[off : off + size], order)


def read_u16_le(buf: bytes, off: int) -> Optional[int]:
    """Little-endian u16 at ``off``, or None when out of bounds."""
    return _read(buf, off, 2, "little")


def read_u16_be(buf: bytes, off: int) -> Optional[int]:
    """Big-endian u16 at ``off``, or None when out of bounds."""
    return _read(buf, off, 2, "big")


def read_u32_le(buf: bytes, off: int) -> Optional[int]:
    """Little-endian u32 at ``off``, or None when out of bounds."""
    return _read(buf, off, 4, "little")


def read_u32_be(buf: bytes, off: int) -> Optional[int]:
    """Big-endian u32 at ``off``, or None when out of bounds."""
    return _read(buf, off, 4, "big")


def read_u64_le(buf: bytes, off: int) -> Optional[int]:
    """Little-endian u64 at ``off``, or None when out of bounds."""
    return _read(buf, off, 8, "little")


def read_u64_be(buf: bytes, off: int) -> Optional[int]:
    """Big-endian u64 at ``off``, or None when out of bounds."""
    return _read(buf, off, 8, "big")


def find_from(haystack: bytes, needle: bytes, start: int) -> Optional[int]:
    """Absolute position of the first ``needle`` at or after ``start``."""
    if not needle or start >= len(haystack) or len(needle) > len(haystack) - start:
        return None
    pos = haystack.find(needle, start)
    return None if pos < 0 else pos


def rfind_within(haystack: bytes, needle: bytes, end: int) -> Optional[int]:
    """Position of the last ``needle`` lying wholly before ``end``."""
    if not needle:
        return None
    upper = min(end, len(haystack))
    if len(needle) > upper:
        return None
    pos = haystack.rfind(needle, 0, upper)
    return None if pos < 0 else pos