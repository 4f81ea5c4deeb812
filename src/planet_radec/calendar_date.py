"""Calendar date to Julian Day conversion (Meeus, Astronomical Algorithms, ch. 7)."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from planet_radec.constants import ROUNDING_FLOOR, ROUNDING_TRUNC

# Rounding applied to the century and day-number terms. Meeus defines floor;
# trunc reproduces an older variant and differs only for negative terms.
_ROUNDERS: dict[str, Callable[[float], int]] = {
    ROUNDING_FLOOR: math.floor,
    ROUNDING_TRUNC: math.trunc,
}


class CalendarSystem(Enum):
    """Calendar a date is expressed in."""

    GREGORIAN = 'gregorian'
    JULIAN = 'julian'


def parse_calendar(value: str | CalendarSystem) -> CalendarSystem:
    """Parse 'gregorian' or 'julian' (case-insensitive) into a CalendarSystem."""
    if isinstance(value, CalendarSystem):
        return value
    try:
        return CalendarSystem(value.strip().lower())
    except ValueError:
        raise ValueError(f'Unknown calendar {value!r}; expected gregorian or julian') from None


def _rounder(rounding: str) -> Callable[[float], int]:
    try:
        return _ROUNDERS[rounding]
    except KeyError:
        raise ValueError(
            f'Invalid rounding {rounding!r}; expected one of {", ".join(_ROUNDERS)}'
        ) from None


def julian_day(
    year: int,
    month: int,
    day: float,
    calendar: CalendarSystem = CalendarSystem.GREGORIAN,
    rounding: str = ROUNDING_FLOOR,
) -> float:
    """Convert a calendar date to a Julian Day referenced to UTC.

    The date is not validated: a day past the end of the month or a month
    outside 1-12 gives a well-defined but meaningless Julian Day.

    Parameters:
        year: Calendar year (astronomical numbering, 0 = 1 BC).
        month: Month number, 1-12.
        day: Day of month; the fractional part is the UTC time of day.
        calendar: Gregorian or Julian calendar.
        rounding: 'floor' (default) or 'trunc' for the integer-part terms.

    Returns:
        Julian Day.
    """
    rnd = _rounder(rounding)
    y = float(year)
    m = float(month)
    if month in (1, 2):
        # January and February count as months 13 and 14 of the previous year.
        y -= 1.0
        m += 12.0
    if calendar is CalendarSystem.GREGORIAN:
        a = rnd(y / 100.0)
        b = 2 - a + rnd(a / 4.0)
    else:
        b = 0
    return rnd(365.25 * (y + 4716.0)) + rnd(30.6001 * (m + 1.0)) + day + b - 1524.5


@dataclass(frozen=True)
class CalendarDate:
    """Calendar date with fractional UTC day, as given by the caller."""

    year: int
    month: int
    day: float
    calendar: CalendarSystem = CalendarSystem.GREGORIAN

    def julian_day(self, rounding: str = ROUNDING_FLOOR) -> float:
        """Julian Day of this date (see julian_day())."""
        return julian_day(self.year, self.month, self.day, self.calendar, rounding)

    def __str__(self) -> str:
        return f'{self.year:04d}-{self.month:02d}-{self.day:09.6f} ({self.calendar.value})'


def calendar_date_from_julian_day(
    jd: float, calendar: CalendarSystem = CalendarSystem.GREGORIAN
) -> CalendarDate:
    """Convert a Julian Day back to a calendar date (Meeus ch. 7, non-negative JD).

    Parameters:
        jd: Julian Day (UTC).
        calendar: Calendar to express the result in.

    Returns:
        CalendarDate whose day carries the fractional time of day.
    """
    jd_shifted = jd + 0.5
    z = math.floor(jd_shifted)
    f = jd_shifted - z
    if calendar is CalendarSystem.GREGORIAN:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4.0)
    else:
        a = z
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return CalendarDate(year=year, month=month, day=day, calendar=calendar)
