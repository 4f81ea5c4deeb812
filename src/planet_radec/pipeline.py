"""Geocentric J2000 RA/Dec of a planet: the public computation pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from planet_radec.angle_utils import SexagesimalAngle, to_sexagesimal_hours
from planet_radec.bodies import Body
from planet_radec.calendar_date import CalendarDate
from planet_radec.ephemeris import EphemerisAdapter, SpiceEphemeris
from planet_radec.frames import ecliptic_to_equatorial, to_geocentric
from planet_radec.params import PipelineConfig
from planet_radec.spherical import to_spherical

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanetPosition:
    """Geocentric equatorial J2000 position of a body at one instant."""

    body: Body
    julian_day: float
    right_ascension: SexagesimalAngle
    right_ascension_deg: float
    declination_deg: float
    distance_au: float


class PositionPipeline:
    """Julian Day -> ephemeris -> geocentric -> equatorial -> (RA, Dec).

    The obliquity and Julian Day rounding policy come from one PipelineConfig
    and the body and Earth vectors from one adapter, for every call.
    """

    def __init__(
        self,
        ephemeris: EphemerisAdapter | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.ephemeris: EphemerisAdapter = ephemeris if ephemeris is not None else SpiceEphemeris()
        self.config = config if config is not None else PipelineConfig()
        self._obliquity_rad = self.config.obliquity_rad

    def position_at(self, date: CalendarDate, body: Body) -> PlanetPosition:
        """Position of body at a calendar date (fractional UTC day)."""
        return self.position_at_julian_day(date.julian_day(self.config.rounding), body)

    def position_at_julian_day(self, jd: float, body: Body) -> PlanetPosition:
        """Position of body at a UTC Julian Day.

        Raises:
            EphemerisRangeError: Propagated from the adapter.
        """
        body_helio = self.ephemeris.heliocentric_ecliptic_position(jd, body)
        earth_helio = self.ephemeris.heliocentric_ecliptic_position(jd, Body.EARTH)
        geo_ecliptic = to_geocentric(body_helio, earth_helio)
        geo_equatorial = ecliptic_to_equatorial(geo_ecliptic, self._obliquity_rad)
        sky = to_spherical(geo_equatorial)
        position = PlanetPosition(
            body=body,
            julian_day=jd,
            right_ascension=to_sexagesimal_hours(sky.right_ascension_deg),
            right_ascension_deg=sky.right_ascension_deg,
            declination_deg=sky.declination_deg,
            distance_au=geo_equatorial.norm(),
        )
        logger.debug(
            '%s JD %.6f: RA %.6f deg, Dec %.6f deg',
            body.display_name,
            jd,
            position.right_ascension_deg,
            position.declination_deg,
        )
        return position


def compute_position(
    date: CalendarDate,
    body: Body,
    ephemeris: EphemerisAdapter | None = None,
    config: PipelineConfig | None = None,
) -> PlanetPosition:
    """Compute the geocentric J2000 right ascension and declination of body.

    Parameters:
        date: Calendar date; fractional day is UTC time of day.
        body: Target body.
        ephemeris: Adapter supplying heliocentric ecliptic vectors; None
            creates a SpiceEphemeris.
        config: Obliquity and rounding policy; None uses the defaults.

    Returns:
        PlanetPosition.

    Raises:
        EphemerisRangeError: If the ephemeris does not cover the date.
        RuntimeError: If the default SPICE kernels cannot be loaded.
    """
    return PositionPipeline(ephemeris, config).position_at(date, body)
