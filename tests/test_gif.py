from sigcarve.core import FileKind, Outcome
from sigcarve.validators.gif import GifValidator


def _minimal():
    return b"GIF89a" + bytes([1, 0, 1, 0, 0, 0, 0]) + b"\x3b"


def test_validates_minimal_gif89a():
    v = _minimal()
    res = GifValidator().validate(v)
    assert res.outcome is Outcome.CONFIRMED
    assert res.length == len(v)


def test_rejects_bad_header():
    assert GifValidator().validate(bytes(32)).outcome is Outcome.REJECTED


def test_validates_gif_with_tables_and_blocks():
    v = b"GIF87a" + bytes([1, 0, 1, 0, 0x80, 0, 0])
    v += bytes(6)  # global colour table, 2 entries
    v += bytes([0x21, 0xF9, 4, 0, 0, 0, 0, 0])  # graphic control extension
    v += bytes([0x2C]) + bytes(9)  # image descriptor, no local table
    v += bytes([2, 2, 0x4C, 0x01, 0])  # LZW min code size + data
    v += b"\x3b"
    res = GifValidator().validate(v + b"trailing garbage")
    assert res.outcome is Outcome.CONFIRMED
    assert res.length == len(v)


def test_needs_more_without_trailer():
    v = _minimal()[:-1]
    assert GifValidator().validate(v).outcome is Outcome.NEEDS_MORE


def test_needs_more_for_truncated_sub_blocks():
    v = b"GIF89a" + bytes([1, 0, 1, 0, 0, 0, 0]) + bytes([0x21, 0xF9, 10, 0, 0])
    assert GifValidator().validate(v).outcome is Outcome.NEEDS_MORE


def test_rejects_unknown_block():
    v = b"GIF89a" + bytes([1, 0, 1, 0, 0, 0, 0]) + b"\x99"
    assert GifValidator().validate(v).outcome is Outcome.REJECTED


def test_needs_more_when_short():
    assert GifValidator().validate(b"GIF89a").outcome is Outcome.NEEDS_MORE


def test_kind():
    assert GifValidator().kind() is FileKind.GIF