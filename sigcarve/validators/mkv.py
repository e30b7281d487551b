"""Matroska/WebM validator: EBML header followed by a sized Segment element."""

from __future__ import annotations

from typing import Optional

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

EBML_HEADER = b"\x1a\x45\xdf\xa3"
SEGMENT_ID = b"\x18\x53\x80\x67"
UNKNOWN_SIZE = (1 << 64) - 1
_MAX_MKV_SIZE = 16 << 30


def read_vint_size(buf: bytes, off: int) -> Optional[tuple[int, int]]:
    """Decode an EBML size vint at ``off`` as ``(value, byte_count)``.

    An all-ones value reports :data:`UNKNOWN_SIZE`. Returns None when the
    vint is invalid or truncated.
    """
    if not 0 <= off < len(buf) or buf[off] == 0:
        return None
    first = buf[off]
    length = 9 - first.bit_length()
    if off + length > len(buf):
        return None
    mask = 0x7F >> (length - 1)
    tail = bytes(buf[off + 1 : off + length])
    value = int.from_bytes(bytes([first & mask]) + tail, "big")
    if first & mask == mask and all(b == 0xFF for b in tail):
        return UNKNOWN_SIZE, length
    return value, length


class MkvValidator(Validator):
    """Confirms Matroska files whose Segment has a known size."""

    def validate(self, window: bytes) -> Validation:
        size = len(window)
        if size < 8 or window[:4] != EBML_HEADER:
            return Validation.rejected()
        header = read_vint_size(window, 4)
        if header is None:
            return Validation.needs_more()
        segment_at = 4 + header[1] + header[0]
        if segment_at > UNKNOWN_SIZE:
            return Validation.rejected()
        if segment_at + 5 > size:
            return Validation.needs_more()
        if window[segment_at : segment_at + 4] != SEGMENT_ID:
            return Validation.rejected()
        segment = read_vint_size(window, segment_at + 4)
        if segment is None:
            return Validation.needs_more()
        seg_size, seg_vint_len = segment
        total = segment_at + 4 + seg_vint_len + seg_size
        if seg_size == UNKNOWN_SIZE or total > _MAX_MKV_SIZE:
            return Validation.rejected()
        if total > size:
            return Validation.needs_more()
        return Validation.confirm_with(total, baseline_recoverability(FileKind.MKV))

    def kind(self) -> FileKind:
        return FileKind.MKV