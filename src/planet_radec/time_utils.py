"""Time conversion wrappers around rms-julian (UTC Julian Day to TDB for SPICE)."""

from __future__ import annotations

import logging
import math
import re

import julian

from planet_radec.calendar_date import CalendarDate, CalendarSystem
from planet_radec.config import get_leapsecs_path
from planet_radec.constants import J2000_MIDNIGHT_JD, SECONDS_PER_DAY

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def _ensure_leapsecs() -> None:
    """Load the leap seconds file if not already loaded.

    rms-julian requires a NAIF LSK (e.g. naif0012.tls). If the configured file
    is missing or unreadable, falls back to rms-julian's bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    # UTC handling consistent with SPICE kernels.
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    try:
        julian.load_lsk(path)
        _leapsecs_loaded = True
    except (OSError, KeyError, ValueError) as e:
        logger.info(
            'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
            path,
            e,
        )
        try:
            julian.load_lsk()
        except Exception as fallback_err:
            logger.error(
                'Fallback to rms-julian bundled LSK failed: %s',
                fallback_err,
                exc_info=True,
            )
            raise
        _leapsecs_loaded = True


def parse_datetime(string: str) -> tuple[int, float] | None:
    """Parse date/time string to UTC (day, sec).

    Parameters:
        string: Date/time string (any format accepted by rms-julian, plus a
            trailing ISO 'Z').

    Returns:
        (day, sec) where day is days since 2000-01-01 and sec is seconds
        within that day; None on parse failure.
    """
    _ensure_leapsecs()
    candidate_strings = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not parse the ISO UTC suffix "Z".
        candidate_strings.append(stripped[:-1])
    year_hms_match = re.fullmatch(r'(\d{4})\s+(\d{1,2}:\d{2}:\d{2})', stripped)
    if year_hms_match is not None:
        year, hms = year_hms_match.groups()
        # "YYYY HH:MM:SS" means Jan 1st of that year at the given time.
        candidate_strings.append(f'{year}-01-01 {hms}')
    for candidate in candidate_strings:
        try:
            result = julian.day_sec_from_string(candidate)
            day, sec = result[0], result[1]
            return (int(day), float(sec))
        except (ValueError, TypeError, LookupError, OSError):
            continue
    return None


def calendar_date_from_string(string: str) -> CalendarDate:
    """Parse a UTC date/time string into a Gregorian CalendarDate.

    Parameters:
        string: Date/time string (e.g. '2021-06-28 23:02:24').

    Returns:
        CalendarDate whose fractional day carries the time of day.

    Raises:
        ValueError: If the string cannot be parsed.
    """
    parsed = parse_datetime(string)
    if parsed is None:
        raise ValueError(f'Could not parse date/time {string!r}')
    day, sec = parsed
    year, month, dom = ymd_from_day(day)
    return CalendarDate(
        year=int(year),
        month=int(month),
        day=int(dom) + sec / SECONDS_PER_DAY,
        calendar=CalendarSystem.GREGORIAN,
    )


def ymd_from_day(day: int) -> tuple[int, int, int]:
    """Convert day since 2000-01-01 to Gregorian (year, month, day)."""
    return julian.ymd_from_day(day)


def day_sec_from_julian_day(jd: float) -> tuple[int, float]:
    """Split a UTC Julian Day into (day, sec) since 2000-01-01 00:00 UTC.

    Parameters:
        jd: Julian Day (UTC).

    Returns:
        (day, sec) with 0 <= sec < 86400.
    """
    days = jd - J2000_MIDNIGHT_JD
    day = math.floor(days)
    sec = (days - day) * SECONDS_PER_DAY
    return (int(day), sec)


def tai_from_day_sec(day: int, sec: float) -> float:
    """Convert UTC (day, sec) to TAI seconds.

    Parameters:
        day: Days since 2000-01-01.
        sec: Seconds within that day.

    Returns:
        TAI in seconds.
    """
    _ensure_leapsecs()
    return float(julian.tai_from_day_sec(day, sec))


def tdb_from_tai(tai: float) -> float:
    """Convert TAI to TDB seconds. Used as ET for SPICE.

    Parameters:
        tai: TAI in seconds.

    Returns:
        TDB (ephemeris time) in seconds past J2000.
    """
    return float(julian.tdb_from_tai(tai))


def et_from_julian_day(jd: float) -> float:
    """Convert a UTC Julian Day to ET (TDB seconds past J2000) for SPICE.

    Parameters:
        jd: Julian Day (UTC).

    Returns:
        ET (TDB) in seconds.
    """
    day, sec = day_sec_from_julian_day(jd)
    return tdb_from_tai(tai_from_day_sec(day, sec))
