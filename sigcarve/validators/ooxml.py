"""OOXML validator: ZIP archives whose first entry is ``[Content_Types].xml``."""

from __future__ import annotations

import struct

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator
from sigcarve.validators.zip import ZIP_LFH, eocd_total_length

CONTENT_TYPES = b"[Content_Types].xml"
_MAX_OOXML = 256 << 20
_FNAME_OFF = 30
_FNAME_LEN = struct.Struct("<H")
_FLAVOURS = (
    (b"word/document.xml", FileKind.DOCX),
    (b"xl/workbook.xml", FileKind.XLSX),
    (b"ppt/presentation.xml", FileKind.PPTX),
)


class OoxmlValidator(Validator):
    """Confirms DOCX/XLSX/PPTX containers and tells them apart."""

    def validate(self, window: bytes) -> Validation:
        return self.validate_with_kind(window)[0]

    def kind(self) -> FileKind:
        return FileKind.DOCX

    def validate_with_kind(self, window: bytes) -> tuple[Validation, FileKind]:
        return self._check(bytes(window))

    def _check(self, data: bytes) -> tuple[Validation, FileKind]:
        fallback = self.kind()
        if len(data) < 64 or not data.startswith(ZIP_LFH):
            return Validation.rejected(), fallback
        (fname_len,) = _FNAME_LEN.unpack_from(data, 26)
        fname_end = _FNAME_OFF + fname_len
        if fname_end > len(data):
            return Validation.needs_more(), fallback
        if data[_FNAME_OFF:fname_end] != CONTENT_TYPES:
            return Validation.rejected(), fallback
        total = eocd_total_length(data)
        if total is not None and total > _MAX_OOXML:
            return Validation.rejected(), fallback
        if total is None or total > len(data):
            return Validation.needs_more(), fallback
        kind = next((k for path, k in _FLAVOURS if path in data), FileKind.ZIP)
        return Validation.confirm_with(total, baseline_recoverability(kind)), kind