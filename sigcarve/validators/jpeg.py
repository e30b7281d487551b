"""JPEG validator: walks markers from SOI to EOI."""

from __future__ import annotations

from typing import Optional

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator, read_u16_be

_EOI = 0xD9
_SOI = 0xD8
_SOS = 0xDA
_TEM = 0x01


def _is_rst(marker: int) -> bool:
    return 0xD0 <= marker <= 0xD7


def _skip_entropy(data: bytes, pos: int) -> Optional[int]:
    """Position of the 0xFF preceding the next real marker.

    Returns ``len(data)`` when the data runs out, or None when the window
    ends inside a run of 0xFF bytes.
    """
    size = len(data)
    while pos < size:
        ff = data.find(0xFF, pos)
        if ff < 0:
            return size
        nxt = ff + 1
        while nxt < size and data[nxt] == 0xFF:
            nxt += 1
        if nxt >= size:
            return None
        if data[nxt] == 0x00 or _is_rst(data[nxt]):
            pos = nxt + 1
            continue
        return nxt - 1
    return pos


class JpegValidator(Validator):
    """Confirms JPEG streams and measures them up to the EOI marker."""

    def validate(self, window: bytes) -> Validation:
        data = bytes(window)
        size = len(data)
        if size < 4 or data[:3] != b"\xff\xd8\xff":
            return Validation.rejected()

        pos = 2
        while True:
            while pos < size and data[pos] == 0xFF:
                pos += 1
            if pos >= size:
                return Validation.needs_more()
            marker = data[pos]
            pos += 1

            if marker == _EOI:
                return Validation.confirm_with(pos, baseline_recoverability(FileKind.JPG))
            if marker in (0x00, 0xFF, _SOI):
                return Validation.rejected()
            if _is_rst(marker) or marker == _TEM:
                continue

            seg_len = read_u16_be(data, pos)
            if seg_len is None:
                return Validation.needs_more()
            if seg_len < 2:
                return Validation.rejected()
            pos += seg_len
            if pos > size:
                return Validation.needs_more()

            if marker == _SOS:
                pos = _skip_entropy(data, pos)
                if pos is None or pos >= size:
                    return Validation.needs_more()

    def kind(self) -> FileKind:
        return FileKind.JPG