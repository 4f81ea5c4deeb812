"""Frame-tagged rectangular vectors and the heliocentric/ecliptic to equatorial transform.

Each pipeline stage produces its own vector type, so a heliocentric vector
cannot be passed where a geocentric one is expected:

    HeliocentricEcliptic --to_geocentric--> GeocentricEcliptic
    GeocentricEcliptic --ecliptic_to_equatorial--> GeocentricEquatorial

Rotation follows http://www.stjarnhimlen.se/comp/tutorial.html#3: ecliptic and
equatorial axes share the x axis (the vernal point) and differ by a rotation
about it through the obliquity.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class _Rectangular:
    """Cartesian vector (AU or dimensionless)."""

    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        """Return the vector as a length-3 float64 array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @classmethod
    def from_array(cls, vec: np.ndarray | list[float] | tuple[float, ...]):
        """Build from any length-3 sequence."""
        if len(vec) != 3:
            raise ValueError(f'Expected a length-3 vector, got length {len(vec)}')
        return cls(float(vec[0]), float(vec[1]), float(vec[2]))


@dataclass(frozen=True)
class HeliocentricEcliptic(_Rectangular):
    """Sun-centered position in ecliptic J2000 axes (AU)."""


@dataclass(frozen=True)
class GeocentricEcliptic(_Rectangular):
    """Earth-centered position in ecliptic J2000 axes (AU)."""


@dataclass(frozen=True)
class GeocentricEquatorial(_Rectangular):
    """Earth-centered position in equatorial J2000 axes (AU)."""


def _require(vec: object, frame: type, name: str) -> None:
    # Exact type: the frames are siblings and must not be interchanged.
    if type(vec) is not frame:
        raise TypeError(f'{name} must be {frame.__name__}, got {type(vec).__name__}')


def rotation_x(angle_rad: float) -> np.ndarray:
    """Matrix rotating a vector about the x axis by angle_rad.

    Applied to (x, y, z) it yields (x, y cos a - z sin a, y sin a + z cos a).
    """
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, c, -s],
            [0.0, s, c],
        ],
        dtype=np.float64,
    )


def to_geocentric(
    body: HeliocentricEcliptic, earth: HeliocentricEcliptic
) -> GeocentricEcliptic:
    """Translate a heliocentric body position to Earth's center (body - earth).

    Parameters:
        body: Heliocentric ecliptic position of the target body.
        earth: Heliocentric ecliptic position of Earth from the same series.

    Returns:
        Geocentric ecliptic position.
    """
    _require(body, HeliocentricEcliptic, 'body')
    _require(earth, HeliocentricEcliptic, 'earth')
    return GeocentricEcliptic(body.x - earth.x, body.y - earth.y, body.z - earth.z)


def ecliptic_to_equatorial(vec: GeocentricEcliptic, obliquity_rad: float) -> GeocentricEquatorial:
    """Rotate a geocentric ecliptic vector into equatorial axes.

    Parameters:
        vec: Geocentric ecliptic vector.
        obliquity_rad: Obliquity of the ecliptic (radians).

    Returns:
        Geocentric equatorial vector.
    """
    _require(vec, GeocentricEcliptic, 'vec')
    return GeocentricEquatorial.from_array(rotation_x(obliquity_rad) @ vec.as_array())


def equatorial_to_ecliptic(vec: GeocentricEquatorial, obliquity_rad: float) -> GeocentricEcliptic:
    """Rotate a geocentric equatorial vector back into ecliptic axes (by -obliquity)."""
    _require(vec, GeocentricEquatorial, 'vec')
    return GeocentricEcliptic.from_array(rotation_x(-obliquity_rad) @ vec.as_array())
