"""Pipeline parameters: obliquity and rounding policy (env, CLI, API)."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from planet_radec.config import get_obliquity_override, get_rounding_override
from planet_radec.constants import OBLIQUITY_J2000_DEG, ROUNDING_FLOOR, ROUNDING_POLICIES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineConfig:
    """Fixed configuration for one pipeline instance.

    Attributes:
        obliquity_deg: Obliquity of the ecliptic (degrees) used for every
            ecliptic to equatorial rotation made by the pipeline.
        rounding: Julian Day rounding policy, 'floor' (Meeus) or 'trunc'.
    """

    obliquity_deg: float = OBLIQUITY_J2000_DEG
    rounding: str = ROUNDING_FLOOR

    def __post_init__(self) -> None:
        if self.rounding not in ROUNDING_POLICIES:
            raise ValueError(
                f'Invalid rounding {self.rounding!r}; expected one of {", ".join(ROUNDING_POLICIES)}'
            )
        if not math.isfinite(self.obliquity_deg):
            raise ValueError(f'Obliquity must be finite, got {self.obliquity_deg!r}')

    @property
    def obliquity_rad(self) -> float:
        """Obliquity in radians."""
        return math.radians(self.obliquity_deg)


def parse_rounding(value: str) -> str:
    """Normalize a rounding policy name ('floor' or 'trunc', case-insensitive).

    Raises:
        ValueError: If value is not a known policy.
    """
    policy = value.strip().lower()
    if policy not in ROUNDING_POLICIES:
        raise ValueError(
            f'Invalid rounding {value!r}; expected one of {", ".join(ROUNDING_POLICIES)}'
        )
    return policy


def pipeline_config_from_env() -> PipelineConfig:
    """Build PipelineConfig from PLANET_RADEC_OBLIQUITY_DEG and PLANET_RADEC_ROUNDING.

    Unset variables keep the defaults.

    Returns:
        PipelineConfig.

    Raises:
        ValueError: If a variable is set to an invalid value.
    """
    obliquity_deg = OBLIQUITY_J2000_DEG
    raw_obliquity = get_obliquity_override()
    if raw_obliquity is not None:
        try:
            obliquity_deg = float(raw_obliquity)
        except ValueError as e:
            raise ValueError(
                f'PLANET_RADEC_OBLIQUITY_DEG must be a number, got {raw_obliquity!r}'
            ) from e
        logger.info('Obliquity overridden from environment: %s deg', obliquity_deg)
    rounding = ROUNDING_FLOOR
    raw_rounding = get_rounding_override()
    if raw_rounding is not None:
        rounding = parse_rounding(raw_rounding)
    return PipelineConfig(obliquity_deg=obliquity_deg, rounding=rounding)
