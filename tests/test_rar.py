from sigcarve.core import FileKind, Outcome
from sigcarve.validators.rar import RAR4_SIG, RAR5_SIG, RarValidator, read_vint


def rar4_block(head_type: int, head_size: int = 7, flags: int = 0) -> bytes:
    return (
        bytes(2)
        + bytes([head_type])
        + flags.to_bytes(2, "little")
        + head_size.to_bytes(2, "little")
        + bytes(head_size - 7)
    )


def test_rejects_garbage():
    assert RarValidator().validate(bytes(64)).outcome is Outcome.REJECTED


def test_needs_more_with_only_signature():
    v = RAR4_SIG + bytes(6)
    assert RarValidator().validate(v).outcome is Outcome.NEEDS_MORE


def test_short_window_needs_more():
    assert RarValidator().validate(b"Rar!").outcome is Outcome.NEEDS_MORE


def test_rar4_end_of_archive():
    v = RAR4_SIG + rar4_block(0x73, 13) + rar4_block(0x7B)
    result = RarValidator().validate(v + b"junk")
    assert result.is_confirmed
    assert result.length == len(v)
    assert result.recoverability == 75


def test_rar4_add_size_counted():
    block = rar4_block(0x74, 11, flags=0x8000)
    block = block[:7] + (5).to_bytes(4, "little") + bytes(5)
    v = RAR4_SIG + block + rar4_block(0x7B)
    result = RarValidator().validate(v)
    assert result.is_confirmed
    assert result.length == len(v)


def test_rar4_rejects_tiny_head_size():
    v = RAR4_SIG + bytes(2) + bytes([0x73, 0, 0]) + (3).to_bytes(2, "little")
    assert RarValidator().validate(v).is_rejected


def test_rar5_end_of_archive():
    v = RAR5_SIG + bytes(4) + bytes([3, 5, 0, 0])
    result = RarValidator().validate(v)
    assert result.is_confirmed
    assert result.length == 16


def test_rar5_walks_data_area():
    file_block = bytes(4) + bytes([3, 2, 2, 10]) + bytes(10)
    eoa = bytes(4) + bytes([3, 5, 0, 0])
    v = RAR5_SIG + file_block + eoa
    result = RarValidator().validate(v)
    assert result.is_confirmed
    assert result.length == 34 == len(v)


def test_rar5_truncated_needs_more():
    v = RAR5_SIG + bytes(4) + bytes([3, 1, 0, 0])
    assert RarValidator().validate(v).is_needs_more


def test_read_vint():
    assert read_vint(b"\x05", 0) == (5, 1)
    assert read_vint(b"\x00\x81\x01", 1) == (129, 2)
    assert read_vint(b"\x80", 0) is None
    assert read_vint(b"\xff" * 12, 0) is None


def test_kind():
    assert RarValidator().kind() is FileKind.RAR