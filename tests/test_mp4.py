import struct

import pytest

from sigcarve.core import FileKind
from sigcarve.validators.mp4 import Mp4Validator


def build_mp4(boxes):
    return b"".join(struct.pack(">I", 8 + len(data)) + typ + data for typ, data in boxes)


FTYP = build_mp4([(b"ftyp", b"isom\x00\x00\x02\x00mp41")])
SIMPLE = FTYP + build_mp4([(b"mdat", bytes(32))])


@pytest.mark.parametrize(
    "data, recoverability",
    [
        (SIMPLE, 85),
        (FTYP + struct.pack(">I", 0) + b"mdat" + bytes(20), 75),
        (FTYP + struct.pack(">I", 1) + b"mdat" + struct.pack(">Q", 24) + bytes(8), 85),
    ],
    ids=["simple", "size-zero-to-end", "extended-size"],
)
def test_confirmed_length_covers_window(data, recoverability):
    result = Mp4Validator().validate(data)
    assert result.is_confirmed
    assert result.length == len(data)
    assert result.recoverability == recoverability


@pytest.mark.parametrize(
    "data",
    [
        build_mp4([(b"mdat", bytes(16))]),
        FTYP + struct.pack(">I", 1) + b"mdat" + struct.pack(">Q", 8),
        FTYP + struct.pack(">I", 4) + b"mdat",
        FTYP + build_mp4([(b"\x00\x01\x02\x03", bytes(8))]),
    ],
    ids=["no-ftyp", "extended-below-16", "small-box", "non-printable-type"],
)
def test_rejected(data):
    assert Mp4Validator().validate(data).is_rejected


@pytest.mark.parametrize("data", [SIMPLE[:-4], b"\x00\x00"], ids=["box-past-window", "short"])
def test_needs_more(data):
    assert Mp4Validator().validate(data).is_needs_more


def test_kind():
    assert Mp4Validator().kind() is FileKind.MP4