"""Adobe PSD/PSB validator: walks the leading length-prefixed sections."""

from __future__ import annotations

import struct

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

PSD_MAGIC = b"8BPS"
_HEADER_LEN = 26
_MAX_PSD = 2 << 30
_UNSIZED_PENALTY = 5
_MAGIC_VERSION = struct.Struct(">4sH")
_LEN32 = struct.Struct(">I")
_LEN64 = struct.Struct(">Q")


class PsdValidator(Validator):
    """Confirms PSD/PSB files.

    The image-data section cannot be sized without decoding, so the rest of
    the window is taken as image data, with reduced recoverability.
    """

    def validate(self, window: bytes) -> Validation:
        size = len(window)
        if size < _HEADER_LEN + 4:
            return Validation.needs_more()
        magic, version = _MAGIC_VERSION.unpack_from(window)
        if magic != PSD_MAGIC or version not in (1, 2):
            return Validation.rejected()
        # Skip the colour-mode data and image-resources sections.
        section = _HEADER_LEN
        for _ in range(2):
            (length,) = _LEN32.unpack_from(window, section)
            section += 4 + length
            if section + 4 > size:
                return Validation.needs_more()
        # PSB (version 2) sizes the layer-and-mask section with 64 bits.
        len_field = _LEN64 if version == 2 else _LEN32
        if section + len_field.size > size:
            return Validation.needs_more()
        (lm_len,) = len_field.unpack_from(window, section)
        image_data_start = section + len_field.size + lm_len
        total = max(size, image_data_start) if image_data_start < size else image_data_start
        if total > _MAX_PSD:
            return Validation.rejected()
        return Validation.confirm_with(
            total, baseline_recoverability(FileKind.PSD) - _UNSIZED_PENALTY
        )

    def kind(self) -> FileKind:
        return FileKind.PSD