"""DICOM DT (datetime) values."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from dcmkit.dcmtime.dates import Date, _extract_date
from dcmkit.dcmtime.precision import (
    DT_PATTERN,
    ParseDTError,
    PrecisionLevel,
    _extract_duration,
    is_included,
)
from dcmkit.dcmtime.times import Time, _extract_time


def _format_offset(value: datetime.datetime, separator: str) -> str:
    offset = value.utcoffset() or datetime.timedelta(0)
    total = offset // datetime.timedelta(seconds=1)
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


@dataclass(frozen=True)
class Datetime:
    """A parsed DICOM datetime with its precision.

    When ``no_offset`` is true the source value carried no UTC offset and none
    is rendered by ``dcm()``. A naive ``value`` is treated as UTC.
    """

    value: datetime.datetime
    precision: PrecisionLevel = PrecisionLevel.FULL
    no_offset: bool = False

    def dcm(self) -> str:
        """Render the DICOM DT string, truncated to the precision."""
        text = Date(self.value.date(), self.precision).dcm()
        if is_included(PrecisionLevel.HOURS, self.precision):
            text += Time(self.value, self.precision).dcm()
        if self.no_offset:
            return text
        return text + _format_offset(self.value, "")

    def __str__(self) -> str:
        text = str(Date(self.value.date(), self.precision))
        if is_included(PrecisionLevel.HOURS, self.precision):
            text += " " + str(Time(self.value, self.precision))
        if self.no_offset:
            return text
        return text + " " + _format_offset(self.value, ":")


def parse_datetime(dt_string: str) -> Datetime:
    """Parse a DICOM DT value of the form ``YYYYMMDDHHMMSS.FFFFFF&ZZXX``."""
    match = DT_PATTERN.fullmatch(dt_string)
    if match is None:
        raise ParseDTError()

    year, month, day, precision = _extract_date(match, PrecisionLevel.FULL, False)
    hours, minutes, seconds, micros, precision = _extract_time(match, precision)

    offset_hours = _extract_duration(match, "OFFSET_HOURS")
    offset_minutes = _extract_duration(match, "OFFSET_MINUTES")
    sign = -1 if match.group("OFFSET_SIGN") == "-" else 1
    offset = (offset_hours.value * 3600 + offset_minutes.value * 60) * sign

    try:
        zone = datetime.timezone(datetime.timedelta(seconds=offset))
        value = datetime.datetime(
            year, month, day, hours, minutes, seconds, micros, tzinfo=zone
        )
    except ValueError as exc:
        raise ParseDTError() from exc

    return Datetime(value=value, precision=precision, no_offset=not offset_hours.present)