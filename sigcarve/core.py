"""Shared carving types: file kinds, validation outcomes and carved-file records."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class FileKind(enum.Enum):
    """Kinds of file the carver can recover. The value is the file extension."""

    JPG = "jpg"
    PNG = "png"
    GIF = "gif"
    BMP = "bmp"
    TIFF = "tiff"
    MP4 = "mp4"
    MOV = "mov"
    MKV = "mkv"
    AVI = "avi"
    PDF = "pdf"
    DOCX = "docx"
    XLSX = "xlsx"
    PPTX = "pptx"
    ZIP = "zip"
    RAR = "rar"
    SEVENZ = "7z"
    PSD = "psd"
    AI = "ai"
    TXT = "txt"
    CSV = "csv"
    SQL = "sql"
    OTHER = "bin"

    def extension(self) -> str:
        """File extension used when writing a recovered file of this kind."""
        return self.value


class Outcome(enum.Enum):
    """Result category of one validation attempt."""

    CONFIRMED = "confirmed"
    REJECTED = "rejected"
    NEEDS_MORE = "needs_more"


@dataclass(frozen=True)
class Validation:
    """Outcome of a single validation attempt.

    For a confirmed hit, ``length`` is the file length in bytes from the
    candidate start and ``recoverability`` a 0-100 confidence score.
    """

    outcome: Outcome
    length: int = 0
    recoverability: int = 0

    @classmethod
    def confirm(cls, length: int) -> "Validation":
        return cls(Outcome.CONFIRMED, length, 80)

    @classmethod
    def confirm_with(cls, length: int, recoverability: int) -> "Validation":
        return cls(Outcome.CONFIRMED, length, recoverability)

    @classmethod
    def rejected(cls) -> "Validation":
        return cls(Outcome.REJECTED)

    @classmethod
    def needs_more(cls) -> "Validation":
        return cls(Outcome.NEEDS_MORE)

    @property
    def is_confirmed(self) -> bool:
        return self.outcome is Outcome.CONFIRMED

    @property
    def is_rejected(self) -> bool:
        return self.outcome is Outcome.REJECTED

    @property
    def is_needs_more(self) -> bool:
        return self.outcome is Outcome.NEEDS_MORE


@dataclass(frozen=True)
class CarvedFile:
    """A confirmed file found on the device."""

    kind: FileKind
    offset_bytes: int
    length_bytes: int
    signature: str
    recoverability: int


_BASELINE = {
    FileKind.BMP: 90,
    FileKind.PSD: 90,
    FileKind.SEVENZ: 90,
    FileKind.MP4: 85,
    FileKind.MOV: 85,
    FileKind.MKV: 85,
    FileKind.AVI: 85,
    FileKind.JPG: 80,
    FileKind.PNG: 80,
    FileKind.GIF: 80,
    FileKind.PDF: 80,
    FileKind.ZIP: 75,
    FileKind.DOCX: 75,
    FileKind.XLSX: 75,
    FileKind.PPTX: 75,
    FileKind.RAR: 75,
    FileKind.TIFF: 70,
    FileKind.AI: 70,
    FileKind.TXT: 50,
    FileKind.CSV: 50,
    FileKind.SQL: 50,
    FileKind.OTHER: 40,
}


def baseline_recoverability(kind: FileKind) -> int:
    """Prior recoverability score for a file kind."""
    return _BASELINE[kind]