# dcmkit

A small, dependency-free toolkit for working with DICOM data structures in
Python.

It provides:

- `dcmkit.dcmtime.precision`, `dcmkit.dcmtime.dates`, `dcmkit.dcmtime.times`
  and `dcmkit.dcmtime.datetimes`: these parse and format DICOM `DA` (date),
  `TM` (time) and `DT` (datetime) values. Each value keeps the precision it
  was stored with.
- `dcmkit.charset`: maps DICOM *Specific Character Set* names to Python
  codecs and decodes text with them.
- `dcmkit.dicomio`: a binary `Reader` that respects read limits, and a
  `Writer`. Both work with little- or big-endian byte order.
- `dcmkit.element` and `dcmkit.dataset`: data elements, typed values,
  sequences, pixel data descriptions, and datasets. A dataset can be searched,
  iterated flat (including nested sequences), printed and serialised to JSON.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Dates and times

```python
from dcmkit.dcmtime.dates import parse_date
from dcmkit.dcmtime.times import parse_time
from dcmkit.dcmtime.datetimes import parse_datetime
from dcmkit.dcmtime.precision import PrecisionLevel

da = parse_date("202012")
da.precision is PrecisionLevel.MONTH   # True
da.dcm()                               # "202012"
str(da)                                # "2020-12"

tm = parse_time("123001.431")
tm.precision                           # PrecisionLevel.MS3
tm.dcm()                               # "123001.431"
str(tm)                                # "12:30:01.431"

dt = parse_datetime("20201210123001.000431+0100")
dt.no_offset                           # False
dt.dcm()                               # "20201210123001.000431+0100"
str(dt)                                # "2020-12-10 12:30:01.000431 +01:00"
```

`Date`, `Time` and `Datetime` are frozen dataclasses.

- Each holds a standard-library `value` and a `precision` (`PrecisionLevel`).
- `Date` also has `is_nema`.
- `Datetime` also has `no_offset`.

`dcm()` renders the DICOM string. It is truncated to the precision.

`parse_date` accepts legacy NEMA-300 dates such as `2020.12.10`. `dcm()` writes them back with the dots.

Malformed values raise `ParseDAError`, `ParseTMError` or `ParseDTError`. All three are subclasses of `ValueError`.

## Character sets

```python
from dcmkit.charset import parse_specific_character_set, CodingSystemType

cs = parse_specific_character_set(["ISO_IR 192"])
cs.decode(b"caf\xc3\xa9", CodingSystemType.IDEOGRAPHIC)   # "café"
```

The number of names given decides how the three coding systems are filled:

| Names given | Alphabetic | Ideographic | Phonetic |
|---|---|---|---|
| One | first | first | first |
| Two | first | second | second |
| Three | first | second | third |

An empty list gives a `CodingSystem` with no codecs. Bytes are then decoded as ASCII/UTF-8.

Unknown names raise `UnknownCharacterSetError`.

## Binary I/O

```python
import io
from dcmkit.dicomio import Reader, Writer, ByteOrder

buf = io.BytesIO()
w = Writer(buf, ByteOrder.LITTLE, implicit=True)
w.write_uint16(0x0028)
w.write_uint32(100)

data = buf.getvalue()
r = Reader(io.BytesIO(data), ByteOrder.LITTLE, len(data))
r.read_uint16()          # 40
r.read_uint32()          # 100
r.is_limit_exhausted()   # True
```

**Limits.** `Reader.push_limit(n)` restricts reading to the next `n` bytes. `Reader.pop_limit()` skips whatever is left of that window and restores the previous limit.

**Reading.**
- `read(n)` returns at most what is left before the limit.
- The typed reads (`read_uint16`, `read_float64`, `read_string`, …) raise `EOFError` when not enough bytes remain.
- `read_string` decodes with the coding system set by `set_coding_system`.

**Skipping.** `skip(n)` raises `InsufficientBytesLeftError` when `n` goes past the limit.

**Peeking.** `peek(n)` returns the next bytes without consuming them.

**No limit.** `LIMIT_READ_UNTIL_EOF` means the reader has no limit and reads until the stream ends.

## Elements and datasets

```python
from dcmkit.element import Element, new_value, must_get_ints
from dcmkit.dataset import Dataset

rows = Element(tag=(0x0028, 0x0010), value=new_value([100]))
cols = Element(tag=(0x0028, 0x0011), value=new_value([200]))
ds = Dataset([rows, cols])

must_get_ints(ds.find_element_by_tag((0x0028, 0x0010)).value)   # [100]
[e.tag for e in ds.flat_iter()]
print(ds)
ds.to_json()
```

`new_value` builds a typed value from the data it is given:

| Data given | Value built |
|---|---|
| `bytes` | `BytesValue` |
| list of `str` | `StringsValue` |
| list of `int` | `IntsValue` |
| list of `float` | `FloatsValue` |
| `PixelDataInfo` | `PixelDataValue` |
| list of lists of `Element` | `SequencesValue` made of `SequenceItemValue`s |

Anything else raises `UnexpectedDataTypeError`.

`must_get_ints`, `must_get_strings`, `must_get_bytes`, `must_get_floats` and `must_get_pixel_data_info` return the held data. They raise `TypeError` for a value of another type.

Searching a `Dataset`:
- `find_element_by_tag` searches the top level only.
- `find_element_by_tag_nested` also looks inside sequences.
- Both raise `ElementNotFoundError` when nothing matches.

`flat_iter()`, and iterating a dataset directly, yields each sequence element before the elements of its items.

`format_tag` renders a tag as `(gggg,eeee)`.

## What this package does not do

- **No file reading or writing.** It does not parse or write DICOM files or streams as a whole. There is no file parser, no transfer syntax detection, and no element-by-element reader. `dicomio` only supplies the primitives such a parser would use.
- **No tag dictionary.** The `Tag Name:` line of an element or dataset printout is always empty. Value representations are not filled in automatically.
- **No image handling.** Pixel data is not decoded into images, and frames are not exported.
- **No command-line tool.** The package is a library only.