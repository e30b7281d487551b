"""MP4/MOV validator: walks top-level ISO-BMFF boxes and sums their sizes."""

from __future__ import annotations

import struct

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

_MAX_MP4_SIZE = 16 << 30
_MAX_BOXES = 1_000_000
_BOX_HEADER = struct.Struct(">I4s")
_LARGE_SIZE = struct.Struct(">Q")
_TO_EOF_PENALTY = 10


def _is_box_type(typ: bytes) -> bool:
    return all(0x20 <= b <= 0x7E for b in typ)


class Mp4Validator(Validator):
    """Confirms MP4 files starting with an ``ftyp`` box."""

    def validate(self, window: bytes) -> Validation:
        size = len(window)
        if size < 8:
            return Validation.needs_more()
        if window[4:8] != b"ftyp":
            return Validation.rejected()
        baseline = baseline_recoverability(FileKind.MP4)
        pos = 0
        for _ in range(_MAX_BOXES):
            if pos + 8 > size:
                return Validation.needs_more()
            size32, typ = _BOX_HEADER.unpack_from(window, pos)
            if not _is_box_type(typ):
                return Validation.rejected()
            if size32 == 0:
                # The box runs to the end of the media: take the whole window.
                return Validation.confirm_with(size, baseline - _TO_EOF_PENALTY)
            if size32 == 1:
                if pos + 16 > size:
                    return Validation.needs_more()
                (box_size,) = _LARGE_SIZE.unpack_from(window, pos + 8)
                minimum = 16
            else:
                box_size, minimum = size32, 8
            if box_size < minimum:
                return Validation.rejected()
            pos += box_size
            if pos > _MAX_MP4_SIZE:
                return Validation.rejected()
            if pos == size:
                return Validation.confirm_with(pos, baseline)
            if pos > size:
                return Validation.needs_more()
        return Validation.rejected()

    def kind(self) -> FileKind:
        return FileKind.MP4