"""DICOM data elements and the typed values they hold."""

from __future__ import annotations

import base64
import dataclasses
import enum
import json
import math
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union


class UnexpectedDataTypeError(TypeError):
    """Raised when data of an unsupported type is given to ``new_value``."""

    def __init__(self, message: str = "the type of the data was unexpected or not allowed") -> None:
        super().__init__(message)


class ValueType(enum.IntEnum):
    """The kind of data a Value holds; each kind maps to one Python type."""

    STRINGS = 0
    BYTES = 1
    INTS = 2
    PIXEL_DATA = 3
    SEQUENCE_ITEM = 4
    SEQUENCES = 5
    FLOATS = 6


def format_tag(tag: tuple[int, int]) -> str:
    """Render a (group, element) tag as ``(gggg,eeee)``."""
    group, element = tag
    return f"({group:04x},{element:04x})"


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    text = repr(number)
    return text[:-2] if text.endswith(".0") else text


def _json_float(number: float) -> float | int:
    if math.isfinite(number) and number.is_integer() and abs(number) < 1e21:
        return int(number)
    return number


def _bracketed(items: list[str]) -> str:
    return "[" + " ".join(items) + "]"


@dataclass(eq=True)
class BytesValue:
    """A value holding raw bytes."""

    value: bytes
    value_type: ClassVar[ValueType] = ValueType.BYTES

    def __str__(self) -> str:
        return _bracketed([str(b) for b in self.value])

    def _json_data(self) -> Any:
        return base64.b64encode(bytes(self.value)).decode("ascii")


@dataclass(eq=True)
class StringsValue:
    """A value holding a list of strings."""

    value: list[str]
    value_type: ClassVar[ValueType] = ValueType.STRINGS

    def __str__(self) -> str:
        return _bracketed(list(self.value))

    def _json_data(self) -> Any:
        return list(self.value)


@dataclass(eq=True)
class IntsValue:
    """A value holding a list of integers."""

    value: list[int]
    value_type: ClassVar[ValueType] = ValueType.INTS

    def __str__(self) -> str:
        return _bracketed([str(i) for i in self.value])

    def _json_data(self) -> Any:
        return list(self.value)


@dataclass(eq=True)
class FloatsValue:
    """A value holding a list of floats."""

    value: list[float]
    value_type: ClassVar[ValueType] = ValueType.FLOATS

    def __str__(self) -> str:
        return _bracketed([_format_float(f) for f in self.value])

    def _json_data(self) -> Any:
        return [_json_float(f) for f in self.value]


@dataclass(eq=True)
class SequenceItemValue:
    """A single item of a sequence: a list of elements."""

    elements: list[Element] = field(default_factory=list)
    value_type: ClassVar[ValueType] = ValueType.SEQUENCE_ITEM

    @property
    def value(self) -> list[Element]:
        return self.elements

    def __str__(self) -> str:
        return _bracketed([str(e) for e in self.elements])

    def _json_data(self) -> Any:
        return [e._json_data() for e in self.elements]


@dataclass(eq=True)
class SequencesValue:
    """A value holding the items of a DICOM sequence."""

    value: list[SequenceItemValue]
    value_type: ClassVar[ValueType] = ValueType.SEQUENCES

    def __str__(self) -> str:
        return _bracketed([str(item) for item in self.value])

    def _json_data(self) -> Any:
        return [item._json_data() for item in self.value]


@dataclass(eq=True)
class PixelDataInfo:
    """Pixel data of an element, either as frames or as unprocessed bytes.

    ``intentionally_skipped`` is set when reading the value was skipped;
    ``intentionally_unprocessed`` when its bytes were kept in
    ``unprocessed_value_data`` without being decoded into frames.
    """

    intentionally_skipped: bool = False
    frames: list[Any] = field(default_factory=list)
    parse_err: BaseException | None = None
    is_encapsulated: bool = False
    offsets: list[int] = field(default_factory=list, compare=False)
    intentionally_unprocessed: bool = False
    unprocessed_value_data: bytes = b""

    def _json_data(self) -> Any:
        def frame_data(frame: Any) -> Any:
            if dataclasses.is_dataclass(frame) and not isinstance(frame, type):
                return dataclasses.asdict(frame)
            return str(frame)

        return {
            "intentionallySkipped": self.intentionally_skipped,
            "Frames": [frame_data(f) for f in self.frames] if self.frames else None,
            "parseErr": None if self.parse_err is None else str(self.parse_err),
            "isEncapsulated": self.is_encapsulated,
            "Offsets": list(self.offsets) if self.offsets else None,
            "intentionallyUnprocessed": self.intentionally_unprocessed,
            "UnprocessedValueData": (
                base64.b64encode(bytes(self.unprocessed_value_data)).decode("ascii")
                if self.unprocessed_value_data
                else None
            ),
        }


@dataclass(eq=True)
class PixelDataValue:
    """A value holding PixelDataInfo."""

    info: PixelDataInfo
    value_type: ClassVar[ValueType] = ValueType.PIXEL_DATA

    @property
    def value(self) -> PixelDataInfo:
        return self.info

    def __str__(self) -> str:
        count = len(self.info.frames)
        if count == 0:
            return "empty pixel data"
        if self.info.is_encapsulated:
            return f"encapsulated FramesLength={count}"
        if self.info.parse_err is not None:
            return f"parseErr err={self.info.parse_err} FramesLength={count}"
        return f"FramesLength={count}"

    def _json_data(self) -> Any:
        return self.info._json_data()


Value = Union[
    BytesValue,
    StringsValue,
    IntsValue,
    FloatsValue,
    SequenceItemValue,
    SequencesValue,
    PixelDataValue,
]


@dataclass(eq=True)
class Element:
    """A DICOM data element: a tag, its value representation and a value."""

    tag: tuple[int, int]
    value: Value
    value_representation: Any = None
    raw_value_representation: str = ""
    value_length: int = 0

    def __str__(self) -> str:
        return (
            "[\n"
            f"  Tag: {format_tag(self.tag)}\n"
            "  Tag Name: \n"
            f"  VR: {self.value_representation}\n"
            f"  VR Raw: {self.raw_value_representation}\n"
            f"  VL: {self.value_length}\n"
            f"  Value: {self.value}\n"
            "]\n\n"
        )

    def _json_data(self) -> Any:
        group, element = self.tag
        return {
            "tag": {"Group": group, "Element": element},
            "VR": self.value_representation,
            "rawVR": self.raw_value_representation,
            "valueLength": self.value_length,
            "value": self.value._json_data(),
        }

    def to_json(self) -> str:
        """Serialise this element as compact JSON."""
        return json.dumps(self._json_data(), separators=(",", ":"), ensure_ascii=False)


def _is_sequence_data(data: list[Any]) -> bool:
    return all(
        isinstance(item, list) and all(isinstance(e, Element) for e in item)
        for item in data
    )


def new_value(data: Any) -> Value:
    """Build a Value from strings, ints, floats, bytes, PixelDataInfo or sequence items.

    A sequence is given as a list of items, each a list of Elements.
    """
    if isinstance(data, (bytes, bytearray)):
        return BytesValue(bytes(data))
    if isinstance(data, PixelDataInfo):
        return PixelDataValue(data)
    if isinstance(data, list):
        if not data or all(isinstance(x, str) for x in data):
            return StringsValue(list(data))
        if all(isinstance(x, int) and not isinstance(x, bool) for x in data):
            return IntsValue(list(data))
        if all(isinstance(x, float) for x in data):
            return FloatsValue(list(data))
        if _is_sequence_data(data):
            return SequencesValue([SequenceItemValue(list(item)) for item in data])
    raise UnexpectedDataTypeError()


def _must_get(value: Value, expected: ValueType) -> Any:
    if value.value_type != expected:
        raise TypeError(
            f"expected ValueType of {expected.name}, got: {value.value_type.name}"
        )
    return value.value


def must_get_ints(value: Value) -> list[int]:
    """Return the ints of an Ints value; raise TypeError otherwise."""
    return _must_get(value, ValueType.INTS)


def must_get_strings(value: Value) -> list[str]:
    """Return the strings of a Strings value; raise TypeError otherwise."""
    return _must_get(value, ValueType.STRINGS)


def must_get_bytes(value: Value) -> bytes:
    """Return the bytes of a Bytes value; raise TypeError otherwise."""
    return _must_get(value, ValueType.BYTES)


def must_get_floats(value: Value) -> list[float]:
    """Return the floats of a Floats value; raise TypeError otherwise."""
    return _must_get(value, ValueType.FLOATS)


def must_get_pixel_data_info(value: Value) -> PixelDataInfo:
    """Return the PixelDataInfo of a PixelData value; raise TypeError otherwise."""
    return _must_get(value, ValueType.PIXEL_DATA)