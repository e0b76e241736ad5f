"""DICOM Specific Character Set handling."""

from __future__ import annotations

import enum
from dataclasses import dataclass

# DICOM character set names mapped to Python codec names.
_CODECS: dict[str, str] = {
    "": "latin_1",
    "ISO_IR 6": "latin_1",
    "ISO 2022 IR 6": "latin_1",
    "ISO_IR 13": "shift_jis",
    "ISO 2022 IR 13": "shift_jis",
    "ISO_IR 100": "latin_1",
    "ISO 2022 IR 100": "latin_1",
    "ISO_IR 101": "iso8859_2",
    "ISO 2022 IR 101": "iso8859_2",
    "ISO_IR 109": "iso8859_3",
    "ISO 2022 IR 109": "iso8859_3",
    "ISO_IR 110": "iso8859_4",
    "ISO 2022 IR 110": "iso8859_4",
    "ISO_IR 126": "iso8859_7",
    "ISO 2022 IR 126": "iso8859_7",
    "ISO_IR 127": "iso8859_6",
    "ISO 2022 IR 127": "iso8859_6",
    "ISO_IR 138": "iso8859_8",
    "ISO 2022 IR 138": "iso8859_8",
    "ISO_IR 144": "iso8859_5",
    "ISO 2022 IR 144": "iso8859_5",
    "ISO_IR 148": "iso8859_9",
    "ISO 2022 IR 148": "iso8859_9",
    "ISO 2022 IR 149": "euc_kr",
    "ISO 2022 IR 159": "iso2022_jp",
    "ISO_IR 166": "cp874",
    "ISO 2022 IR 166": "cp874",
    "ISO 2022 IR 87": "iso2022_jp",
    "ISO 2022 IR 58": "gbk",
    "ISO_IR 192": "utf_8",
    "GB18030": "gb18030",
    "GBK": "gbk",
}


class CodingSystemType(enum.Enum):
    """Which of the three coding systems of a value is used."""

    ALPHABETIC = 0
    IDEOGRAPHIC = 1
    PHONETIC = 2


class UnknownCharacterSetError(ValueError):
    """Raised for a Specific Character Set name that is not supported."""


@dataclass(frozen=True)
class CodingSystem:
    """Codecs used to turn DICOM bytes into text.

    Only person names use all three; other values use the ideographic codec.
    A codec of ``None`` means plain ASCII.
    """

    alphabetic: str | None = None
    ideographic: str | None = None
    phonetic: str | None = None

    def decode(
        self, data: bytes, kind: CodingSystemType = CodingSystemType.IDEOGRAPHIC
    ) -> str:
        """Decode ``data`` with the codec chosen by ``kind``."""
        if not data:
            return ""
        codec = {
            CodingSystemType.ALPHABETIC: self.alphabetic,
            CodingSystemType.IDEOGRAPHIC: self.ideographic,
            CodingSystemType.PHONETIC: self.phonetic,
        }[kind]
        if codec is None:
            return bytes(data).decode("utf-8", errors="surrogateescape")
        return bytes(data).decode(codec, errors="replace")


def parse_specific_character_set(encoding_names: list[str]) -> CodingSystem:
    """Build a CodingSystem from the values of a Specific Character Set element."""
    codecs: list[str] = []
    for name in encoding_names:
        try:
            codecs.append(_CODECS[name])
        except KeyError:
            raise UnknownCharacterSetError(
                f"parse_specific_character_set: unknown character set {name!r}"
            ) from None
    if not codecs:
        return CodingSystem()
    if len(codecs) == 1:
        return CodingSystem(codecs[0], codecs[0], codecs[0])
    if len(codecs) == 2:
        return CodingSystem(codecs[0], codecs[1], codecs[1])
    return CodingSystem(codecs[0], codecs[1], codecs[2])