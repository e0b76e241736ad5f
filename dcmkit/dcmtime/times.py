"""DICOM TM (time) values."""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass

from dcmkit.dcmtime.precision import (
    TM_PATTERN,
    ParseTMError,
    PrecisionLevel,
    _DurationInfo,
    _extract_duration,
    _update_precision,
    is_included,
    truncate_microseconds,
)


@dataclass(frozen=True)
class Time:
    """A parsed DICOM time with the precision it was stored with.

    ``value`` may be a ``datetime.time`` or a ``datetime.datetime``; only the
    clock fields are used.
    """

    value: datetime.time | datetime.datetime
    precision: PrecisionLevel = PrecisionLevel.FULL

    def _render(self, separator: str) -> str:
        text = f"{self.value.hour:02d}"
        if not is_included(PrecisionLevel.MINUTES, self.precision):
            return text
        text += f"{separator}{self.value.minute:02d}"
        if not is_included(PrecisionLevel.SECONDS, self.precision):
            return text
        text += f"{separator}{self.value.second:02d}"
        if not is_included(PrecisionLevel.MS1, self.precision):
            return text
        return text + "." + truncate_microseconds(self.value.microsecond, self.precision)

    def dcm(self) -> str:
        """Render the DICOM TM string, truncated to the precision."""
        return self._render("")

    def __str__(self) -> str:
        return self._render(":")


def _extract_time(
    match: re.Match[str], precision_in: PrecisionLevel
) -> tuple[int, int, int, int, PrecisionLevel]:
    hours = _extract_duration(match, "HOURS")
    precision = _update_precision(hours, precision_in, PrecisionLevel.HOURS, False)

    minutes = _extract_duration(match, "MINUTES")
    precision = _update_precision(minutes, precision, PrecisionLevel.MINUTES, False)

    seconds = _extract_duration(match, "SECONDS")
    precision = _update_precision(seconds, precision, PrecisionLevel.SECONDS, False)

    fraction: _DurationInfo = _extract_duration(match, "FRACTION", fractional=True)
    if fraction.present:
        precision = fraction.fraction_precision

    return hours.value, minutes.value, seconds.value, fraction.value, precision


def parse_time(tm_string: str) -> Time:
    """Parse a DICOM TM value of the form ``HHMMSS.FFFFFF``."""
    match = TM_PATTERN.fullmatch(tm_string)
    if match is None:
        raise ParseTMError()

    hours, minutes, seconds, micros, precision = _extract_time(match, PrecisionLevel.FULL)
    try:
        value = datetime.time(hours, minutes, seconds, micros)
    except ValueError as exc:
        raise ParseTMError() from exc
    return Time(value=value, precision=precision)