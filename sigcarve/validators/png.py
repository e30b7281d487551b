"""PNG validator: walks chunks to IEND, checking the IHDR CRC."""

from __future__ import annotations

import struct
import zlib

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

PNG_SIG = b"\x89PNG\r\n\x1a\n"
_MAX_CHUNK_LEN = 256 << 20
_MAX_CHUNKS = 1_000_000
_IHDR_LEN = 13
_CHUNK_HEADER = struct.Struct(">I4s")
_CRC = struct.Struct(">I")


def _is_chunk_type(typ: bytes) -> bool:
    return typ.isalpha() and typ.isascii()


def _ihdr_ok(data: bytes, typ: bytes, length: int, crc_off: int) -> bool:
    if typ != b"IHDR" or length != _IHDR_LEN:
        return False
    (want,) = _CRC.unpack_from(data, crc_off)
    return want == zlib.crc32(data[crc_off - length - 4 : crc_off])


class PngValidator(Validator):
    """Confirms PNG files and measures them up to the IEND chunk."""

    def validate(self, window: bytes) -> Validation:
        data = bytes(window)
        size = len(data)
        if size < len(PNG_SIG):
            return Validation.needs_more()
        if size < len(PNG_SIG) + 12 or not data.startswith(PNG_SIG):
            return Validation.rejected()
        pos = len(PNG_SIG)
        chunks_seen = 0
        while True:
            if pos + 8 > size:
                return Validation.needs_more()
            length, typ = _CHUNK_HEADER.unpack_from(data, pos)
            if length > _MAX_CHUNK_LEN or not _is_chunk_type(typ):
                return Validation.rejected()
            crc_off = pos + 8 + length
            nxt = crc_off + 4
            if nxt > size:
                return Validation.needs_more()
            if chunks_seen == 0 and not _ihdr_ok(data, typ, length, crc_off):
                return Validation.rejected()
            chunks_seen += 1
            if chunks_seen > _MAX_CHUNKS:
                return Validation.rejected()
            if typ == b"IEND":
                return Validation.confirm_with(nxt, baseline_recoverability(FileKind.PNG))
            pos = nxt

    def kind(self) -> FileKind:
        return FileKind.PNG