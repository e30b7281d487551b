"""RIFF/AVI validator: total length is the RIFF payload size plus 8."""

from __future__ import annotations

import struct

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

_MAX_AVI_SIZE = 16 << 30
_RIFF_HEADER = struct.Struct("<4sI4s")


class RiffAviValidator(Validator):
    """Confirms RIFF containers whose form type is ``AVI ``."""

    def validate(self, window: bytes) -> Validation:
        if len(window) < _RIFF_HEADER.size:
            return Validation.needs_more()
        riff, payload, form = _RIFF_HEADER.unpack_from(window)
        total = payload + 8
        if (riff, form) != (b"RIFF", b"AVI ") or not 12 <= total <= _MAX_AVI_SIZE:
            return Validation.rejected()
        return Validation.confirm_with(total, baseline_recoverability(FileKind.AVI))

    def kind(self) -> FileKind:
        return FileKind.AVI