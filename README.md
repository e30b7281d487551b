# sigcarve

sigcarve is a set of format validators for signature-based file carving.
You give a validator a byte window that starts where a file seems to begin.
The validator decides whether the bytes really are a file of its format. If
they are, it works out how long the file is. Validators only read the window
they are given. They have no side effects.

## Install

```
pip install .
```

## Validators

Each validator lives in its own module under `sigcarve.validators`:

| Module | Class | Formats |
| --- | --- | --- |
| `bmp` | `BmpValidator` | BMP |
| `gif` | `GifValidator` | GIF87a, GIF89a |
| `jpeg` | `JpegValidator` | JPEG |
| `png` | `PngValidator` | PNG (IHDR CRC checked) |
| `tiff` | `TiffValidator` | TIFF, little- and big-endian |
| `mp4` | `Mp4Validator` | MP4 (ISO-BMFF starting with `ftyp`) |
| `mkv` | `MkvValidator` | Matroska / WebM |
| `riff_avi` | `RiffAviValidator` | AVI |
| `pdf` | `PdfValidator` | PDF |
| `zip` | `ZipValidator` | ZIP |
| `ooxml` | `OoxmlValidator` | DOCX, XLSX, PPTX |
| `rar` | `RarValidator` | RAR4, RAR5 |
| `sevenz` | `SevenZValidator` | 7z |
| `psd` | `PsdValidator` | PSD, PSB |
| `text` | `TextValidator` | TXT, CSV, SQL (heuristic) |

Every validator subclasses `sigcarve.validators.base.Validator` and provides
these methods:

- `validate(window)` returns a `Validation`.
- `kind()` returns the `FileKind` the validator reports.
- `validate_with_kind(window)` returns a pair `(Validation, FileKind)`.
  `OoxmlValidator` uses it to tell DOCX, XLSX and PPTX apart. An OOXML
  container of any other flavour is reported as `FileKind.ZIP`.

`TextValidator` takes the kind it should check for, for example
`TextValidator(FileKind.CSV)`.

## Results

`sigcarve.core.Validation` holds an `outcome` (an `Outcome` member), a
`length` and a `recoverability` score from 0 to 100. The `outcome` is one of:

- `CONFIRMED`: the file takes up `length` bytes from the start of the window.
- `REJECTED`: almost certainly a false hit.
- `NEEDS_MORE`: the window is too short to decide. Retry with a larger window.

The properties `is_confirmed`, `is_rejected` and `is_needs_more` test the
outcome.

```python
from sigcarve.validators.gif import GifValidator

window = b"GIF89a" + bytes([1, 0, 1, 0, 0, 0, 0]) + b"\x3b"
result = GifValidator().validate(window)
assert result.is_confirmed
assert result.length == 14
assert result.recoverability == 80
```

`sigcarve.core` also provides the following:

- `FileKind`: the kinds of file. `extension()` gives each kind's file extension.
- `baseline_recoverability(kind)`: the default recoverability score for each kind.
- `CarvedFile`: a record with the kind, offset, length, signature name and
  recoverability of a recovered file.

`sigcarve.validators.base` has bounds-checked integer readers. They are
`read_u16_le`, `read_u16_be`, `read_u32_le`, `read_u32_be`, `read_u64_le` and
`read_u64_be`, and each returns `None` when the read is out of bounds. The
module also has the byte-search helpers `find_from` and `rfind_within`.

## What this package does not do

This package has no command-line program. It does not open disk images. It
does not search them for magic bytes and does not write recovered files
anywhere. You are responsible for the following:

- finding candidate positions;
- reading a window at each position;
- reading a larger window whenever a validator returns `NEEDS_MORE`;
- copying out the confirmed bytes.