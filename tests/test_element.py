from dataclasses import dataclass

import pytest

from dcmkit.element import (
    BytesValue,
    Element,
    FloatsValue,
    IntsValue,
    PixelDataInfo,
    PixelDataValue,
    SequenceItemValue,
    SequencesValue,
    StringsValue,
    UnexpectedDataTypeError,
    ValueType,
    format_tag,
    must_get_bytes,
    must_get_floats,
    must_get_ints,
    must_get_pixel_data_info,
    must_get_strings,
    new_value,
)

PATIENT_NAME = (0x0010, 0x0010)
ROWS = (0x0028, 0x0010)
ADD_OTHER_SEQUENCE = (0x0046, 0x0102)
FLOATING_POINT_VALUE = (0x0040, 0xA161)
AIR_COUNTS = (0x0018, 0x1270)
PIXEL_DATA = (0x7FE0, 0x0010)


@dataclass
class FakeFrame:
    rows: int
    cols: int
    data: list


def seq_element(tag, items):
    return Element(
        tag=tag,
        value=SequencesValue([SequenceItemValue(item) for item in items]),
        value_representation=9,
        raw_value_representation="SQ",
    )


def test_format_tag():
    assert format_tag(ROWS) == "(0028,0010)"
    assert format_tag(ADD_OTHER_SEQUENCE) == "(0046,0102)"


def test_marshal_json_nested_elements():
    inner = Element(tag=PATIENT_NAME, value=StringsValue(["Bob"]), value_representation=2)
    seq = seq_element(ADD_OTHER_SEQUENCE, [[inner]])
    want = (
        '{"tag":{"Group":70,"Element":258},"VR":9,"rawVR":"SQ","valueLength":0,'
        '"value":[[{"tag":{"Group":16,"Element":16},"VR":2,"rawVR":"",'
        '"valueLength":0,"value":["Bob"]}]]}'
    )
    assert seq.to_json() == want


def test_element_string():
    e = Element(
        tag=ROWS,
        value=IntsValue([100]),
        value_representation="VRInt32List",
        raw_value_representation="US",
    )
    want = (
        "[\n"
        "  Tag: (0028,0010)\n"
        "  Tag Name: \n"
        "  VR: VRInt32List\n"
        "  VR Raw: US\n"
        "  VL: 0\n"
        "  Value: [100]\n"
        "]\n\n"
    )
    assert str(e) == want


@pytest.mark.parametrize(
    "data, want",
    [
        (["a", "b"], StringsValue(["a", "b"])),
        ([1.11, 1.22], FloatsValue([1.11, 1.22])),
        ([1, 2], IntsValue([1, 2])),
        (b"\x00\x01", BytesValue(b"\x00\x01")),
        (PixelDataInfo(is_encapsulated=True), PixelDataValue(PixelDataInfo(is_encapsulated=True))),
    ],
)
def test_new_value(data, want):
    assert new_value(data) == want


def test_new_value_sequence():
    inner = Element(tag=PATIENT_NAME, value=StringsValue(["Bob"]), value_representation=2)
    got = new_value([[inner]])
    assert got == SequencesValue([SequenceItemValue([inner])])
    assert got.value_type == ValueType.SEQUENCES


def test_new_value_unexpected_type():
    with pytest.raises(UnexpectedDataTypeError):
        new_value(10)


def test_new_value_mixed_list_rejected():
    with pytest.raises(UnexpectedDataTypeError):
        new_value([1, "a"])


def _el(tag, data):
    return Element(tag=tag, value=new_value(data))


def _pixel(data):
    return _el(
        PIXEL_DATA,
        PixelDataInfo(is_encapsulated=False, frames=[FakeFrame(2, 2, data)]),
    )


def _pn_item(last):
    return [
        Element(
            tag=PATIENT_NAME,
            value=StringsValue(["Bob", last]),
            value_representation="VRStringList",
            raw_value_representation="PN",
        )
    ]


def _second_item():
    return _pn_item("Jones") + [
        Element(
            tag=ROWS,
            value=IntsValue([100]),
            value_representation="VRUInt16List",
            raw_value_representation="US",
        )
    ]


@pytest.mark.parametrize(
    "a, b, want",
    [
        (None, None, True),
        (None, _el(FLOATING_POINT_VALUE, [1.23]), False),
        (_el(FLOATING_POINT_VALUE, [1.23, 4.40, 5.50]), _el(FLOATING_POINT_VALUE, [1.23, 4.40, 5.50]), True),
        (_el(FLOATING_POINT_VALUE, [1.23, 4.40]), _el(FLOATING_POINT_VALUE, [1.23, 4.40, 5.50]), False),
        (_el(FLOATING_POINT_VALUE, [1.23, 4.40, 10.1]), _el(FLOATING_POINT_VALUE, [1.23, 4.40, 5.50]), False),
        (_el(ROWS, [1, 2, 3]), _el(ROWS, [1, 2, 3]), True),
        (_el(ROWS, [1, 2, 6]), _el(ROWS, [1, 2, 3]), False),
        (_el(ROWS, [1, 6]), _el(ROWS, [1, 2, 3]), False),
        (_el(AIR_COUNTS, b"\x01\x02\x03"), _el(AIR_COUNTS, b"\x01\x02\x03"), True),
        (_el(AIR_COUNTS, b"\x01\x02\x04"), _el(AIR_COUNTS, b"\x01\x02\x03"), False),
        (_el(AIR_COUNTS, b"\x01\x02\x03"), _el(AIR_COUNTS, b"\x01\x02"), False),
        (_el(PATIENT_NAME, ["John", "Smith"]), _el(PATIENT_NAME, ["John", "Smith"]), True),
        (_el(PATIENT_NAME, ["John", "Doe"]), _el(PATIENT_NAME, ["John", "Smith"]), False),
        (_el(PATIENT_NAME, ["John"]), _el(PATIENT_NAME, ["John", "Smith"]), False),
        (_pixel([[1], [2], [3], [4]]), _pixel([[1], [2], [3], [4]]), True),
        (_pixel([[1], [2], [3], [6]]), _pixel([[1], [2], [3], [4]]), False),
        (
            seq_element(ADD_OTHER_SEQUENCE, [_pn_item("Jones"), _second_item()]),
            seq_element(ADD_OTHER_SEQUENCE, [_pn_item("Jones"), _second_item()]),
            True,
        ),
        (
            seq_element(ADD_OTHER_SEQUENCE, [_pn_item("Smith"), _second_item()]),
            seq_element(ADD_OTHER_SEQUENCE, [_pn_item("Jones"), _second_item()]),
            False,
        ),
    ],
)
def test_element_equals(a, b, want):
    assert (a == b) is want


def test_values_of_different_types_unequal():
    assert IntsValue([1, 2]) != FloatsValue([1.0, 2.0])


def test_pixel_data_offsets_ignored_in_equality():
    a = PixelDataInfo(offsets=[1, 2])
    b = PixelDataInfo(offsets=[3])
    assert PixelDataValue(a) == PixelDataValue(b)


def test_value_strings():
    assert str(StringsValue(["a", "b"])) == "[a b]"
    assert str(FloatsValue([1.5, 4.0])) == "[1.5 4]"
    assert str(BytesValue(b"\x01\x02")) == "[1 2]"
    assert str(PixelDataValue(PixelDataInfo())) == "empty pixel data"


def test_must_get_helpers():
    assert must_get_ints(IntsValue([5])) == [5]
    assert must_get_strings(StringsValue(["x"])) == ["x"]
    assert must_get_bytes(BytesValue(b"\x07")) == b"\x07"
    assert must_get_floats(FloatsValue([2.5])) == [2.5]
    info = PixelDataInfo(intentionally_skipped=True)
    assert must_get_pixel_data_info(PixelDataValue(info)) is info


@pytest.mark.parametrize(
    "getter, value",
    [
        (must_get_ints, StringsValue(["a"])),
        (must_get_strings, IntsValue([1])),
        (must_get_bytes, FloatsValue([1.0])),
        (must_get_floats, BytesValue(b"")),
        (must_get_pixel_data_info, IntsValue([1])),
    ],
)
def test_must_get_wrong_type(getter, value):
    with pytest.raises(TypeError):
        getter(value)


def test_bytes_json_is_base64():
    e = Element(tag=AIR_COUNTS, value=BytesValue(b"\x01\x02\x03"))
    assert e.to_json().endswith('"value":"AQID"}')