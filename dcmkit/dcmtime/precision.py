"""Precision levels, parse errors and shared parsing helpers for DICOM DA, TM and DT values."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass


class PrecisionLevel(enum.IntEnum):
    """How many segments of a DICOM date/time value were present or should be rendered.

    Lower values are more precise; ``FULL`` is the most precise a value can be.
    """

    FULL = 0
    MS5 = 1
    MS4 = 2
    MS3 = 3
    MS2 = 4
    MS1 = 5
    SECONDS = 6
    MINUTES = 7
    HOURS = 8
    DAY = 9
    MONTH = 10
    YEAR = 11

    def __str__(self) -> str:
        return self.name


class _DicomTimeParseError(ValueError):
    default_message = "error parsing dicom date/time value"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ParseDAError(_DicomTimeParseError):
    """Raised when a DA (date) value cannot be parsed."""

    default_message = (
        "error parsing dicom DA (date) value -- expected format is 'YYYYMMDD'"
    )


class ParseTMError(_DicomTimeParseError):
    """Raised when a TM (time) value cannot be parsed."""

    default_message = (
        "error parsing dicom TM (time) value, but expected format is 'HHMMSS.FFFFFF'"
    )


class ParseDTError(_DicomTimeParseError):
    """Raised when a DT (datetime) value cannot be parsed."""

    default_message = (
        "error parsing dicom DT (datetime) value -- expected format is"
        " 'YYYYMMDDHHMMSS.FFFFFF&ZZXX'"
    )


# All patterns are meant to be used with ``fullmatch``.
DA_PATTERN = re.compile(r"(?P<YEAR>[0-9]{4})(?P<MONTH>[0-9]{2})?(?P<DAY>[0-9]{2})?")

DA_NEMA_PATTERN = re.compile(
    r"(?P<YEAR>[0-9]{4})(?:\.(?P<MONTH>[0-9]{2}))?(?:\.(?P<DAY>[0-9]{2}))?"
)

TM_PATTERN = re.compile(
    r"(?P<HOURS>[0-9]{2})?(?P<MINUTES>[0-9]{2})?(?P<SECONDS>[0-9]{2})?"
    r"(?:\.(?P<FRACTION>[0-9]{1,6}))?"
)

DT_PATTERN = re.compile(
    r"(?P<YEAR>[0-9]{4})"
    r"(?P<MONTH>[0-9]{2})?"
    r"(?P<DAY>[0-9]{2})?"
    r"(?P<HOURS>[0-9]{2})?"
    r"(?P<MINUTES>[0-9]{2})?"
    r"(?P<SECONDS>[0-9]{2})?"
    r"(?::?\.(?P<FRACTION>[0-9]{1,6}))?"
    r"(?::?(?P<OFFSET_SIGN>[-+])(?P<OFFSET_HOURS>[0-9]{2})(?P<OFFSET_MINUTES>[0-9]{2}))?"
)


def is_included(check: PrecisionLevel, limit: PrecisionLevel) -> bool:
    """Return whether segment ``check`` is rendered for a value of precision ``limit``."""
    return check >= limit


def truncate_microseconds(microseconds: int, precision: PrecisionLevel) -> str:
    """Render fractional seconds as six zero-padded digits cut to ``precision``."""
    digits = f"{microseconds:06d}"
    return digits[: 6 - (PrecisionLevel.FULL + precision)]


@dataclass(frozen=True)
class _DurationInfo:
    value: int
    present: bool
    fraction_precision: PrecisionLevel = PrecisionLevel.FULL


def _extract_duration(
    match: re.Match[str], group: str, fractional: bool = False
) -> _DurationInfo:
    text = match.group(group)
    if not text:
        return _DurationInfo(0, False)
    if fractional:
        missing = 6 - len(text)
        return _DurationInfo(
            int(text + "0" * missing), True, PrecisionLevel(PrecisionLevel.FULL + missing)
        )
    return _DurationInfo(int(text), True)


def _update_precision(
    info: _DurationInfo,
    current: PrecisionLevel,
    level: PrecisionLevel,
    level_is_full: bool,
) -> PrecisionLevel:
    if not info.present:
        return current
    return PrecisionLevel.FULL if level_is_full else level