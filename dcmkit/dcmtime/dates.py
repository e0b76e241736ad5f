"""DICOM DA (date) values."""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass

from dcmkit.dcmtime.precision import (
    DA_NEMA_PATTERN,
    DA_PATTERN,
    ParseDAError,
    PrecisionLevel,
    _extract_duration,
    _update_precision,
    is_included,
)


@dataclass(frozen=True)
class Date:
    """A parsed DICOM date with the precision it was stored with.

    ``is_nema`` marks legacy NEMA-300 values written as ``YYYY.MM.DD``.
    """

    value: datetime.date
    precision: PrecisionLevel = PrecisionLevel.FULL
    is_nema: bool = False

    def dcm(self) -> str:
        """Render the DICOM DA string, truncated to the precision."""
        separator = "." if self.is_nema else ""
        parts = [f"{self.value.year:04d}"]
        if is_included(PrecisionLevel.MONTH, self.precision):
            parts.append(f"{self.value.month:02d}")
            if is_included(PrecisionLevel.DAY, self.precision):
                parts.append(f"{self.value.day:02d}")
        return separator.join(parts)

    def __str__(self) -> str:
        text = f"{self.value.year:04d}"
        if not is_included(PrecisionLevel.MONTH, self.precision):
            return text
        text += f"-{self.value.month:02d}"
        if not is_included(PrecisionLevel.DAY, self.precision):
            return text
        return text + f"-{self.value.day:02d}"


def _extract_date(
    match: re.Match[str], precision_in: PrecisionLevel, is_da: bool
) -> tuple[int, int, int, PrecisionLevel]:
    year = _extract_duration(match, "YEAR")
    precision = _update_precision(year, precision_in, PrecisionLevel.YEAR, False)

    month = _extract_duration(match, "MONTH")
    precision = _update_precision(month, precision, PrecisionLevel.MONTH, False)

    day = _extract_duration(match, "DAY")
    precision = _update_precision(day, precision, PrecisionLevel.DAY, is_da)

    month_value = month.value if month.present else 1
    day_value = day.value if day.present else 1
    return year.value, month_value, day_value, precision


def parse_date(da_string: str) -> Date:
    """Parse a DICOM DA value (``YYYYMMDD`` or legacy ``YYYY.MM.DD``)."""
    is_nema = False
    match = DA_PATTERN.fullmatch(da_string)
    if match is None:
        match = DA_NEMA_PATTERN.fullmatch(da_string)
        is_nema = True
    if match is None:
        raise ParseDAError()

    year, month, day, precision = _extract_date(match, PrecisionLevel.FULL, True)
    try:
        value = datetime.date(year, month, day)
    except ValueError as exc:
        raise ParseDAError() from exc
    return Date(value=value, precision=precision, is_nema=is_nema)