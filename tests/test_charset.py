import pytest

from dcmkit.charset import (
    CodingSystem,
    CodingSystemType,
    UnknownCharacterSetError,
    parse_specific_character_set,
)


def test_no_names_gives_ascii_coding_system():
    cs = parse_specific_character_set([])
    assert cs == CodingSystem(None, None, None)
    assert cs.decode(b"Smith^John") == "Smith^John"


def test_single_name_used_for_all_three():
    cs = parse_specific_character_set(["ISO_IR 100"])
    assert cs.alphabetic == cs.ideographic == cs.phonetic
    assert cs.alphabetic is not None


def test_two_names_split_alphabetic_and_rest():
    cs = parse_specific_character_set(["ISO 2022 IR 6", "ISO 2022 IR 87"])
    assert cs.ideographic == cs.phonetic
    assert cs.alphabetic != cs.ideographic


def test_three_names_each_used():
    cs = parse_specific_character_set(["ISO 2022 IR 6", "ISO 2022 IR 87", "ISO 2022 IR 13"])
    assert cs.phonetic != cs.ideographic
    assert cs.alphabetic != cs.ideographic


def test_unknown_name_raises():
    with pytest.raises(UnknownCharacterSetError):
        parse_specific_character_set(["ISO_IR 100", "NOT A CHARSET"])


def test_utf8_round_trip():
    text = "Müller^Zoë"
    cs = parse_specific_character_set(["ISO_IR 192"])
    assert cs.decode(text.encode("utf-8")) == text


def test_latin1_round_trip():
    text = "Müller^Zoë"
    cs = parse_specific_character_set(["ISO_IR 100"])
    assert cs.decode(text.encode("latin-1")) == text


def test_shift_jis_round_trip():
    text = "ヤマダ^タロウ"
    cs = parse_specific_character_set(["ISO_IR 13"])
    assert cs.decode(text.encode("shift_jis")) == text


def test_decode_uses_requested_kind():
    text = "やまだ"
    cs = parse_specific_character_set(["ISO 2022 IR 6", "ISO 2022 IR 87"])
    encoded = text.encode("iso2022_jp")
    assert cs.decode(encoded, CodingSystemType.IDEOGRAPHIC) == text
    assert cs.decode(encoded, CodingSystemType.PHONETIC) == text
    assert cs.decode(encoded, CodingSystemType.ALPHABETIC) != text


def test_empty_data_decodes_to_empty_string():
    cs = parse_specific_character_set(["ISO_IR 192"])
    assert cs.decode(b"") == ""