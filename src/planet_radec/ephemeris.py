"""Ephemeris adapter: heliocentric ecliptic positions of the planets.

The pipeline only depends on the EphemerisAdapter protocol. SpiceEphemeris is
the bundled implementation; it evaluates JPL DE kernels through cspyce in the
ECLIPJ2000 frame. One adapter instance serves the target body and Earth, so
both vectors always come from the same series.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import cspyce

from planet_radec.bodies import Body
from planet_radec.constants import AU_KM, SUN_ID
from planet_radec.frames import HeliocentricEcliptic
from planet_radec.spice.load import load_ephemeris_kernels
from planet_radec.time_utils import et_from_julian_day

logger = logging.getLogger(__name__)

ECLIPTIC_FRAME = 'ECLIPJ2000'


class EphemerisRangeError(ValueError):
    """The ephemeris series cannot be evaluated at the requested Julian Day."""

    def __init__(self, julian_day: float, body: Body, reason: str) -> None:
        super().__init__(
            f'Ephemeris out of range for {body.display_name} at JD {julian_day}: {reason}'
        )
        self.julian_day = julian_day
        self.body = body


@runtime_checkable
class EphemerisAdapter(Protocol):
    """Source of heliocentric ecliptic rectangular coordinates in AU."""

    def heliocentric_ecliptic_position(self, julian_day: float, body: Body) -> HeliocentricEcliptic:
        """Return the body's heliocentric ecliptic position at a UTC Julian Day.

        Raises:
            EphemerisRangeError: If the series does not cover julian_day.
        """
        ...


class SpiceEphemeris:
    """EphemerisAdapter backed by SPICE SPK kernels (cspyce).

    Kernels are furnished on first use. Positions are geometric (no light-time
    or aberration correction), Sun-centered, in ECLIPJ2000 axes.
    """

    def __init__(self, kernel_names: list[str] | None = None) -> None:
        """Create the adapter; kernel_names overrides PLANET_RADEC_KERNELS."""
        self._kernel_names = kernel_names
        self._ready = False

    def _ensure_kernels(self) -> None:
        if self._ready:
            return
        ok, reason = load_ephemeris_kernels(self._kernel_names)
        if not ok:
            raise RuntimeError(reason or 'Failed to load ephemeris kernels')
        self._ready = True

    def heliocentric_ecliptic_position(self, julian_day: float, body: Body) -> HeliocentricEcliptic:
        """Heliocentric ECLIPJ2000 position of body in AU at a UTC Julian Day."""
        self._ensure_kernels()
        et = et_from_julian_day(julian_day)
        try:
            pos_km, _lt = cspyce.spkezp(body.naif_id, et, ECLIPTIC_FRAME, 'NONE', SUN_ID)
        except (LookupError, RuntimeError, ValueError) as e:
            raise EphemerisRangeError(julian_day, body, str(e)) from e
        logger.debug('%s at ET %.3f: %s km', body.display_name, et, list(pos_km))
        return HeliocentricEcliptic(
            float(pos_km[0]) / AU_KM,
            float(pos_km[1]) / AU_KM,
            float(pos_km[2]) / AU_KM,
        )
