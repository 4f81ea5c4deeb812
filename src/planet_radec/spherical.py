"""Rectangular equatorial vector to right ascension and declination."""

from __future__ import annotations

import math
from dataclasses import dataclass

from planet_radec.constants import DEGREES_PER_CIRCLE
from planet_radec.frames import GeocentricEquatorial


@dataclass(frozen=True)
class SphericalPosition:
    """Equatorial direction: RA in [0, 360) and Dec in [-90, 90], degrees."""

    right_ascension_deg: float
    declination_deg: float


def to_spherical(vec: GeocentricEquatorial) -> SphericalPosition:
    """Convert a geocentric equatorial vector to (RA, Dec) in degrees.

    Declination uses atan2(z, sqrt(x^2 + y^2)), which stays accurate near the
    poles where asin(z / r) loses precision. At a celestial pole (x = y = 0)
    right ascension is undefined and is returned as 0.

    Parameters:
        vec: Geocentric equatorial vector (any length unit).

    Returns:
        SphericalPosition.
    """
    if not isinstance(vec, GeocentricEquatorial):
        raise TypeError(f'vec must be GeocentricEquatorial, got {type(vec).__name__}')
    s = math.hypot(vec.x, vec.y)
    declination = math.degrees(math.atan2(vec.z, s))
    if vec.x == 0.0 and vec.y == 0.0:
        return SphericalPosition(right_ascension_deg=0.0, declination_deg=declination)
    ra = math.degrees(math.atan2(vec.y, vec.x))
    if ra < 0.0:
        ra += DEGREES_PER_CIRCLE
    if ra >= DEGREES_PER_CIRCLE:
        # A tiny negative angle can round up to exactly 360.
        ra = 0.0
    return SphericalPosition(right_ascension_deg=ra, declination_deg=declination)


def from_spherical(position: SphericalPosition, distance: float = 1.0) -> GeocentricEquatorial:
    """Convert (RA, Dec) and a distance back to a geocentric equatorial vector."""
    ra = math.radians(position.right_ascension_deg)
    dec = math.radians(position.declination_deg)
    return GeocentricEquatorial(
        distance * math.cos(ra) * math.cos(dec),
        distance * math.sin(ra) * math.cos(dec),
        distance * math.sin(dec),
    )
