"""BMP validator: total size from the header, with sanity checks."""

from __future__ import annotations

import struct

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

_MAX_BMP = 1 << 30
_MIN_WINDOW = 26
# magic, file size, (reserved), pixel-data offset, DIB header size
_HEADER = struct.Struct("<2sI4xII")


class BmpValidator(Validator):
    """Confirms a BMP from its file-size, data-offset and DIB-size fields."""

    def validate(self, window: bytes) -> Validation:
        if len(window) < _MIN_WINDOW:
            return Validation.needs_more()
        magic, size, data_off, dib_size = _HEADER.unpack_from(window)
        plausible = (
            magic == b"BM"
            and 12 <= dib_size <= 256
            and data_off >= 14 + dib_size
            and data_off <= size <= _MAX_BMP
        )
        if not plausible:
            return Validation.rejected()
        return Validation.confirm_with(size, baseline_recoverability(FileKind.BMP))

    def kind(self) -> FileKind:
        return FileKind.BMP