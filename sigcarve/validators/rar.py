"""RAR4 and RAR5 validators: walk blocks up to the end-of-archive record."""

from __future__ import annotations

import struct
from typing import Callable, Optional, Union

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

RAR4_SIG = b"Rar!\x1a\x07\x00"
RAR5_SIG = b"Rar!\x1a\x07\x01\x00"
_MAX_RAR_SIZE = 4 << 30
_MAX_BLOCKS = 5_000_000
_RAR4_EOA = 0x7B
_RAR5_EOA = 5
_U64_MASK = (1 << 64) - 1
_RAR4_HEADER = struct.Struct("<2xBHH")
_RAR4_ADD_SIZE = struct.Struct("<I")

# A block step gives (block_end, is_end_of_archive) or a final Validation.
_Step = Union[tuple[int, bool], Validation]


def read_vint(buf: bytes, off: int) -> Optional[tuple[int, int]]:
    """Decode a RAR5 vint at ``off`` as ``(value, byte_count)``, or None."""
    value = 0
    for k, b in enumerate(buf[off : off + 10]):
        value |= (b & 0x7F) << (7 * k)
        if not b & 0x80:
            return value & _U64_MASK, k + 1
    return None


def _rar4_block(data: bytes, pos: int) -> _Step:
    if pos + 7 > len(data):
        return Validation.needs_more()
    head_type, flags, head_size = _RAR4_HEADER.unpack_from(data, pos)
    if head_size < 7:
        return Validation.rejected()
    add_size = 0
    if flags & 0x8000:
        if pos + 11 > len(data):
            return Validation.needs_more()
        (add_size,) = _RAR4_ADD_SIZE.unpack_from(data, pos + 7)
    return pos + head_size + add_size, head_type == _RAR4_EOA


def _rar5_block(data: bytes, pos: int) -> _Step:
    if pos + 4 > len(data):
        return Validation.needs_more()
    fields = []
    cursor = pos + 4
    # header size, header type, flags, and the data size when flagged
    for _ in range(4):
        field = read_vint(data, cursor)
        if field is None:
            return Validation.needs_more()
        fields.append(field[0])
        cursor += field[1]
        if len(fields) == 3 and not fields[2] & 0x02:
            fields.append(0)
            break
        if len(fields) == 1:
            type_off = cursor
    hdr_size, hdr_type, _flags, data_size = fields
    return type_off + hdr_size + data_size, hdr_type == _RAR5_EOA


def _walk(data: bytes, start: int, block: Callable[[bytes, int], _Step]) -> Validation:
    pos = start
    for _ in range(_MAX_BLOCKS):
        step = block(data, pos)
        if isinstance(step, Validation):
            return step
        end, is_last = step
        if end > _MAX_RAR_SIZE:
            return Validation.rejected()
        if is_last:
            return Validation.confirm_with(end, baseline_recoverability(FileKind.RAR))
        if end > len(data):
            return Validation.needs_more()
        pos = end
    return Validation.rejected()


class RarValidator(Validator):
    """Confirms RAR4 and RAR5 archives."""

    def validate(self, window: bytes) -> Validation:
        data = bytes(window)
        if len(data) < 8:
            return Validation.needs_more()
        if data.startswith(RAR5_SIG):
            return _walk(data, len(RAR5_SIG), _rar5_block)
        if data.startswith(RAR4_SIG):
            return _walk(data, len(RAR4_SIG), _rar4_block)
        return Validation.rejected()

    def kind(self) -> FileKind:
        return FileKind.RAR