from sigcarve.core import FileKind, Outcome
from sigcarve.validators.text import TextValidator


def test_validates_simple_txt():
    buf = b"Hello, world!\n" * 32
    result = TextValidator(FileKind.TXT).validate(buf)
    assert result.outcome is Outcome.CONFIRMED
    assert result.length == len(buf)
    assert result.recoverability == 50


def test_rejects_binary():
    assert TextValidator(FileKind.TXT).validate(b"\xff" * 1024).is_rejected


def test_validates_csv():
    buf = b"a,b,c,d,e\n" * 64
    assert TextValidator(FileKind.CSV).validate(buf).is_confirmed


def test_rejects_csv_without_delimiters():
    buf = b"plain text line\n" * 64
    assert TextValidator(FileKind.CSV).validate(buf).is_rejected


def test_short_window_needs_more():
    assert TextValidator(FileKind.TXT).validate(b"short").is_needs_more


def test_length_stops_at_first_non_printable():
    buf = b"x" * 300 + b"\x00" + b"y" * 5
    result = TextValidator(FileKind.TXT).validate(buf)
    assert result.is_confirmed
    assert result.length == 300


def test_rejects_when_printable_run_too_short():
    buf = b"x" * 100 + b"\x00" + b"y" * 400
    assert TextValidator(FileKind.TXT).validate(buf).is_rejected


def test_sql_needs_keyword():
    sql = b"SELECT * FROM t;\n" * 20
    assert TextValidator(FileKind.SQL).validate(sql).is_confirmed
    assert TextValidator(FileKind.SQL).validate(b"no keywords here\n" * 20).is_rejected


def test_kind_is_configured():
    assert TextValidator(FileKind.CSV).kind() is FileKind.CSV