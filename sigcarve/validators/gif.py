"""GIF validator: walks the block stream up to the trailer byte."""

from __future__ import annotations

from typing import Optional

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

_MAX_BLOCKS = 1_000_000
_TRAILER = 0x3B
_EXTENSION = 0x21
_IMAGE = 0x2C
_IMAGE_DESCRIPTOR_LEN = 9


def _colour_table_size(packed: int) -> int:
    return 3 * (1 << ((packed & 0x07) + 1)) if packed & 0x80 else 0


def _skip_sub_blocks(data: bytes, pos: int) -> Optional[int]:
    """Offset just past a sub-block chain starting at ``pos``, or None if truncated."""
    while pos < len(data):
        size = data[pos]
        pos += 1 + size
        if size == 0:
            return pos
        if pos > len(data):
            return None
    return None


def _block_end(data: bytes, intro: int, pos: int) -> Optional[int] | bool:
    """End of the block introduced by ``intro`` whose body starts at ``pos``.

    Returns False for an unknown introducer and None when the window is too
    short to tell.
    """
    if intro == _EXTENSION:
        if pos >= len(data):
            return None
        return _skip_sub_blocks(data, pos + 1)
    if intro == _IMAGE:
        if pos + _IMAGE_DESCRIPTOR_LEN > len(data):
            return None
        pos += _IMAGE_DESCRIPTOR_LEN + _colour_table_size(data[pos + 8])
        if pos >= len(data):
            return None
        return _skip_sub_blocks(data, pos + 1)
    return False


class GifValidator(Validator):
    """Confirms GIF87a/89a files and measures them up to the trailer."""

    def validate(self, window: bytes) -> Validation:
        if len(window) < 13:
            return Validation.needs_more()
        if window[:6] not in (b"GIF87a", b"GIF89a"):
            return Validation.rejected()
        pos = 13 + _colour_table_size(window[10])
        for _ in range(_MAX_BLOCKS):
            if pos >= len(window):
                return Validation.needs_more()
            intro = window[pos]
            pos += 1
            if intro == _TRAILER:
                return Validation.confirm_with(pos, baseline_recoverability(FileKind.GIF))
            end = _block_end(window, intro, pos)
            if end is False:
                return Validation.rejected()
            if end is None:
                return Validation.needs_more()
            pos = end
        if pos >= len(window):
            return Validation.needs_more()
        return Validation.rejected()

    def kind(self) -> FileKind:
        return FileKind.GIF