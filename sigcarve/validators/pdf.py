"""PDF validator: measures from ``%PDF-`` to the last ``%%EOF`` in the window."""

from __future__ import annotations

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

EOF_MARKER = b"%%EOF"
MIN_PDF = 64
_MAX_PDF = 1 << 30
_MAX_TRAILING_WS = 5
_TRAILING_WS = frozenset(b"\n\r ")


class PdfValidator(Validator):
    """Confirms PDFs that carry ``startxref`` and end with ``%%EOF``."""

    def validate(self, window: bytes) -> Validation:
        data = bytes(window)
        if len(data) < MIN_PDF:
            return Validation.needs_more()
        if not data.startswith(b"%PDF-"):
            return Validation.rejected()
        last = data.rfind(EOF_MARKER)
        if data.find(b"startxref", 5) < 0 or last < 0:
            return Validation.needs_more()
        end = last + len(EOF_MARKER)
        limit = min(len(data), end + _MAX_TRAILING_WS)
        while end < limit and data[end] in _TRAILING_WS:
            end += 1
        if end > _MAX_PDF:
            return Validation.rejected()
        return Validation.confirm_with(end, baseline_recoverability(FileKind.PDF))

    def kind(self) -> FileKind:
        return FileKind.PDF