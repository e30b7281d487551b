import pytest

from sigcarve.core import FileKind, Outcome
from sigcarve.validators.ooxml import OoxmlValidator


def build_lfh(name: bytes) -> bytes:
    v = bytearray(b"PK\x03\x04")
    v += bytes([0x14, 0])
    v += bytes(20)
    v += len(name).to_bytes(2, "little")
    v += bytes(2)
    v += name
    return bytes(v)


def build_eocd() -> bytes:
    return b"PK\x05\x06" + bytes(18)


def test_detects_docx():
    v = build_lfh(b"[Content_Types].xml")
    v += b"...filler... word/document.xml ...filler..."
    v += build_eocd()
    val, kind = OoxmlValidator().validate_with_kind(v)
    assert val.outcome is Outcome.CONFIRMED
    assert val.length == len(v)
    assert kind is FileKind.DOCX


def test_rejects_plain_zip():
    v = build_lfh(b"foo.txt") + build_eocd()
    val, _ = OoxmlValidator().validate_with_kind(v)
    assert val.outcome is Outcome.REJECTED


@pytest.mark.parametrize(
    "path, kind",
    [
        (b"xl/workbook.xml", FileKind.XLSX),
        (b"ppt/presentation.xml", FileKind.PPTX),
        (b"other/thing.xml", FileKind.ZIP),
    ],
)
def test_flavours(path, kind):
    v = build_lfh(b"[Content_Types].xml") + b"..filler.. " + path + b" ..filler.."
    v += bytes(20) + build_eocd()
    val, got = OoxmlValidator().validate_with_kind(v)
    assert val.is_confirmed
    assert got is kind
    assert val.recoverability == 75


def test_validate_matches_validate_with_kind():
    v = build_lfh(b"[Content_Types].xml") + b" word/document.xml " + bytes(20)
    v += build_eocd()
    assert OoxmlValidator().validate(v) == OoxmlValidator().validate_with_kind(v)[0]


def test_needs_more_without_eocd():
    v = build_lfh(b"[Content_Types].xml") + bytes(40)
    val, kind = OoxmlValidator().validate_with_kind(v)
    assert val.is_needs_more
    assert kind is FileKind.DOCX


def test_default_kind():
    assert OoxmlValidator().kind() is FileKind.DOCX