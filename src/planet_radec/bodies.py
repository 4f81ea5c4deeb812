"""Solar-system bodies served by the pipeline and their NAIF identifiers."""

from __future__ import annotations

from enum import Enum


class Body(Enum):
    """Major planet, valued by the NAIF ID used to look it up in an SPK kernel.

    Mercury, Venus and Earth use planet-center IDs (present in DE4xx kernels);
    the outer planets use system barycenters, which DE4xx kernels carry without
    the satellite kernels. The barycenter offset is below one arcsecond as
    seen from Earth.
    """

    MERCURY = 199
    VENUS = 299
    EARTH = 399
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8

    @property
    def naif_id(self) -> int:
        """NAIF integer ID for SPICE lookups."""
        return self.value

    @property
    def display_name(self) -> str:
        """Capitalized planet name (e.g. 'Jupiter')."""
        return self.name.capitalize()


# Order in which the CLI reports bodies.
ALL_BODIES: tuple[Body, ...] = (
    Body.MERCURY,
    Body.VENUS,
    Body.EARTH,
    Body.MARS,
    Body.JUPITER,
    Body.SATURN,
    Body.URANUS,
    Body.NEPTUNE,
)

# Case-insensitive planet name or ordinal (1=Mercury .. 8=Neptune) -> Body
_BODY_ALIASES: dict[str, Body] = {b.name.lower(): b for b in ALL_BODIES}
_BODY_ALIASES.update({str(i): b for i, b in enumerate(ALL_BODIES, start=1)})


def parse_body(value: str | Body) -> Body:
    """Parse a body name or planet number into a Body.

    Parameters:
        value: Body instance, name (e.g. 'mars', 'Mars') or number 1-8.

    Returns:
        Matching Body.

    Raises:
        ValueError: If value does not name a supported body.
    """
    if isinstance(value, Body):
        return value
    key = str(value).strip().lower()
    body = _BODY_ALIASES.get(key)
    if body is None:
        valid = ', '.join(b.name.lower() for b in ALL_BODIES)
        raise ValueError(f'Unknown body {value!r}; expected one of {valid} or 1-8')
    return body
