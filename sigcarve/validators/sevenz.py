"""7z validator: length from the next-header offset and size in the start header."""

from __future__ import annotations

import struct

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

SEVENZ_MAGIC = b"\x37\x7a\xbc\xaf\x27\x1c"
_HEADER_LEN = 32
_MAX_7Z = 4 << 30
# magic, (version + start-header CRC), next-header offset, next-header size
_START_HEADER = struct.Struct("<6s6xQQ")


class SevenZValidator(Validator):
    """Confirms 7z archives: 32 + next-header offset + next-header size."""

    def validate(self, window: bytes) -> Validation:
        if len(window) < _HEADER_LEN:
            return Validation.needs_more()
        magic, nh_off, nh_size = _START_HEADER.unpack_from(window)
        total = _HEADER_LEN + nh_off + nh_size
        if magic != SEVENZ_MAGIC or total > _MAX_7Z:
            return Validation.rejected()
        return Validation.confirm_with(total, baseline_recoverability(FileKind.SEVENZ))

    def kind(self) -> FileKind:
        return FileKind.SEVENZ