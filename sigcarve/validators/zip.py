"""ZIP validator: measures an archive up to the end of its EOCD record."""

from __future__ import annotations

from typing import Optional

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator, read_u16_le

ZIP_LFH = b"PK\x03\x04"
EOCD_SIG = b"PK\x05\x06"
ZIP64_EOCD_LOCATOR = b"PK\x06\x07"
ZIP64_EOCD = b"PK\x06\x06"
EOCD_LEN = 22
_EOCD_SEARCH_SPAN = 65_557 + EOCD_LEN
_MAX_ZIP_SIZE = 4 << 30


def locate_eocd(window: bytes) -> Optional[int]:
    """Offset of the last EOCD signature near the end of ``window``, or None."""
    pos = bytes(window).rfind(EOCD_SIG)
    if pos < max(0, len(window) - _EOCD_SEARCH_SPAN):
        return None
    return pos


def locate_zip64(window: bytes) -> Optional[int]:
    """Offset of a ZIP64 EOCD locator, or of a ZIP64 EOCD record, or None."""
    data = bytes(window)
    for sig in (ZIP64_EOCD_LOCATOR, ZIP64_EOCD):
        pos = data.rfind(sig)
        if pos >= 0:
            return pos
    return None


def eocd_total_length(window: bytes) -> Optional[int]:
    """Archive length implied by the EOCD record, or None if not yet visible."""
    eocd = locate_eocd(window)
    comment_len = None if eocd is None else read_u16_le(window, eocd + 20)
    if comment_len is None:
        return None
    return eocd + EOCD_LEN + comment_len


class ZipValidator(Validator):
    """Confirms ZIP archives whose end-of-central-directory lies in the window."""

    def validate(self, window: bytes) -> Validation:
        if len(window) < 30:
            return Validation.needs_more()
        if window[:4] != ZIP_LFH:
            return Validation.rejected()
        total = eocd_total_length(window)
        if total is not None and total > _MAX_ZIP_SIZE:
            return Validation.rejected()
        if total is None or total > len(window):
            return Validation.needs_more()
        return Validation.confirm_with(total, baseline_recoverability(FileKind.ZIP))

    def kind(self) -> FileKind:
        return FileKind.ZIP