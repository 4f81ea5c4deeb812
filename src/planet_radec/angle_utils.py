"""Angle formatting: decimal degrees to sexagesimal hours, and DMS display strings."""

from __future__ import annotations

import math
from dataclasses import dataclass

from planet_radec.constants import (
    DEGREES_PER_CIRCLE,
    HOURS_PER_CIRCLE,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
)


@dataclass(frozen=True)
class SexagesimalAngle:
    """Whole hours, minutes and seconds (sub-second part discarded)."""

    hours: int
    minutes: int
    seconds: int

    def __str__(self) -> str:
        return f'{self.hours:02d}h {self.minutes:02d}m {self.seconds:02d}s'


def to_sexagesimal_hours(degrees: float) -> SexagesimalAngle:
    """Convert an angle in degrees to hours, minutes and seconds of time.

    Every component is truncated, so 359.999999 deg gives 23h 59m 59s rather
    than rounding up to 24h. The input is not normalized; pass a value in
    [0, 360).

    Parameters:
        degrees: Angle in degrees, normally a right ascension in [0, 360).

    Returns:
        SexagesimalAngle.
    """
    hours = degrees / DEGREES_PER_CIRCLE * HOURS_PER_CIRCLE
    whole_hours = math.floor(hours)
    minutes = (hours - whole_hours) * MINUTES_PER_HOUR
    whole_minutes = math.floor(minutes)
    seconds = int((minutes - whole_minutes) * SECONDS_PER_MINUTE)
    return SexagesimalAngle(hours=whole_hours, minutes=whole_minutes, seconds=seconds)


def dms_string(
    value: float,
    separator: str,
    ndecimal: int = 3,
) -> str:
    """Format angle as degrees (or hours), minutes, seconds, rounded to ndecimal.

    Parameters:
        value: Angle in degrees (or hours for RA).
        separator: 3-character string for separators (e.g. 'hms' or 'dms').
        ndecimal: Decimal places for seconds (0 or more).

    Returns:
        Formatted string (e.g. " 12d 30m 45.123s"); a negative value below
        one degree keeps its sign (e.g. " -0d 30m 00.000s").
    """
    if len(separator) < 3:
        sep1 = sep2 = sep3 = ' '
    else:
        sep1, sep2, sep3 = separator[0], separator[1], separator[2]
    isign = 1 if value >= 0 else -1
    secs = abs(value * 3600.0)
    ntens = 10**ndecimal
    ims = round(secs * ntens)
    isec = ims // ntens
    ims = ims - ntens * isec
    imin = isec // 60
    isec = isec - 60 * imin
    ideg = imin // 60
    imin = imin - 60 * ideg
    frac = f'.{ims:0{ndecimal}d}' if ndecimal > 0 else ''
    sign = '-' if isign < 0 else ''
    return f'{sign + str(ideg):>3}{sep1} {imin:02d}{sep2} {isec:02d}{frac}{sep3}'
