"""Geocentric J2000 right ascension and declination of the major planets.

The package converts a calendar date to a Julian Day, obtains heliocentric
ecliptic vectors for a planet and for Earth from an ephemeris adapter, and
reduces them to apparent geocentric equatorial coordinates:
- calendar_date: Meeus Julian Day conversion (Gregorian or Julian calendar)
- frames: frame-tagged vectors, heliocentric to geocentric, ecliptic to equatorial
- spherical: rectangular to (RA, Dec) with quadrant resolution
- angle_utils: decimal degrees to sexagesimal hours
- pipeline: compute_position, the public entry point

The bundled ephemeris adapter evaluates NAIF SPICE kernels via cspyce and uses
rms-julian for UTC to TDB conversion.
"""

from planet_radec.bodies import Body
from planet_radec.calendar_date import CalendarDate, CalendarSystem, julian_day
from planet_radec.ephemeris import EphemerisRangeError
from planet_radec.pipeline import PlanetPosition, PositionPipeline, compute_position

__all__: list[str] = [
    'Body',
    'CalendarDate',
    'CalendarSystem',
    'EphemerisRangeError',
    'PlanetPosition',
    'PositionPipeline',
    'compute_position',
    'julian_day',
]
