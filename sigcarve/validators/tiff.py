"""TIFF validator: walks the IFD chain to find the furthest byte any tag uses."""

from __future__ import annotations

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import (
    Validator,
    read_u16_be,
    read_u16_le,
    read_u32_be,
    read_u32_le,
)

TIFF_MAGIC = 42
_MAX_IFDS = 64
_MAX_TIFF_SIZE = 4 * 1024 * 1024 * 1024
_ENTRY_LEN = 12
# Byte size of one value of each TIFF field type; unknown types count as 1.
_TYPE_SIZES = {
    1: 1, 2: 1, 6: 1, 7: 1,
    3: 2, 8: 2,
    4: 4, 9: 4, 11: 4,
    5: 8, 10: 8, 12: 8,
}


class TiffValidator(Validator):
    """Confirms TIFF files.

    TIFF has no length field, so the length is the highest offset reached by
    any IFD or any tag's out-of-line data.
    """

    def validate(self, window: bytes) -> Validation:
        w = window
        n = len(w)
        if n < 8:
            return Validation.needs_more()
        byte_order = w[:2]
        if byte_order == b"II":
            u16, u32 = read_u16_le, read_u32_le
        elif byte_order == b"MM":
            u16, u32 = read_u16_be, read_u32_be
        else:
            return Validation.rejected()
        if u16(w, 2) != TIFF_MAGIC:
            return Validation.rejected()
        ifd_off = u32(w, 4)
        if ifd_off < 8:
            return Validation.rejected()

        max_end = 8
        visited: set[int] = set()
        for _ in range(_MAX_IFDS):
            if ifd_off in visited:
                return Validation.rejected()
            visited.add(ifd_off)
            if ifd_off + 2 > n:
                return Validation.needs_more()
            entry_count = u16(w, ifd_off)
            if entry_count == 0:
                return Validation.rejected()
            entries_end = ifd_off + 2 + entry_count * _ENTRY_LEN
            if entries_end + 4 > n:
                return Validation.needs_more()
            for off in range(ifd_off + 2, entries_end, _ENTRY_LEN):
                field_type = u16(w, off + 2)
                count = u32(w, off + 4)
                size = _TYPE_SIZES.get(field_type, 1) * count
                if size <= 4:
                    entry_end = off + _ENTRY_LEN
                else:
                    entry_end = u32(w, off + 8) + size
                if entry_end > _MAX_TIFF_SIZE:
                    return Validation.rejected()
                max_end = max(max_end, entry_end)
            next_ifd = u32(w, entries_end)
            max_end = max(max_end, entries_end + 4)
            if next_ifd == 0:
                break
            ifd_off = next_ifd

        if max_end > n:
            return Validation.needs_more()
        return Validation.confirm_with(max_end, baseline_recoverability(FileKind.TIFF))

    def kind(self) -> FileKind:
        return FileKind.TIFF