"""Heuristic text validator for TXT, CSV and SQL, which have no magic bytes."""

from __future__ import annotations

import re

from sigcarve.core import FileKind, Validation, baseline_recoverability
from sigcarve.validators.base import Validator

MIN_TEXT_BYTES = 256
_PRINTABLE_THRESHOLD_PCT = 95
_SQL_SCAN = 4096
_SQL_KEYWORDS = (b"select ", b"insert ", b"update ", b"create ", b"delete ")
_PRINTABLE_BYTES = bytes(range(0x20, 0x7F)) + b"\t\n\r"
_NON_PRINTABLE = re.compile(rb"[^\x20-\x7e\t\n\r]")


def _csv_like(data: bytes) -> bool:
    newlines = data.count(b"\n")
    return newlines > 0 and data.count(b",") >= newlines


def _sql_like(data: bytes) -> bool:
    head = data[:_SQL_SCAN].lower()
    return any(keyword in head for keyword in _SQL_KEYWORDS)


_TELL_TALES = {FileKind.CSV: _csv_like, FileKind.SQL: _sql_like}


class TextValidator(Validator):
    """Accepts windows that are overwhelmingly printable ASCII.

    CSV needs at least as many commas as newlines; SQL needs a keyword near
    the start.
    """

    def __init__(self, kind: FileKind) -> None:
        self._kind = kind

    def __repr__(self) -> str:
        return f"TextValidator({self._kind!r})"

    def validate(self, window: bytes) -> Validation:
        data = bytes(window)
        if len(data) < MIN_TEXT_BYTES:
            return Validation.needs_more()
        printable = len(data) - len(data.translate(None, _PRINTABLE_BYTES))
        if printable * 100 // len(data) < _PRINTABLE_THRESHOLD_PCT:
            return Validation.rejected()
        tell_tale = _TELL_TALES.get(self._kind)
        if tell_tale is not None and not tell_tale(data):
            return Validation.rejected()
        first_binary = _NON_PRINTABLE.search(data)
        end = first_binary.start() if first_binary else len(data)
        if end < MIN_TEXT_BYTES:
            return Validation.rejected()
        return Validation.confirm_with(end, baseline_recoverability(self._kind))

    def kind(self) -> FileKind:
        return self._kind