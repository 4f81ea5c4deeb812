"""Tests for rectangular to spherical conversion."""

from __future__ import annotations

import math
import random

import pytest

from planet_radec.frames import GeocentricEquatorial
from planet_radec.spherical import SphericalPosition, from_spherical, to_spherical


def test_axes() -> None:
    """Each axis direction maps to its RA/Dec quadrant."""
    cases = [
        ((1.0, 0.0, 0.0), 0.0, 0.0),
        ((0.0, 2.0, 0.0), 90.0, 0.0),
        ((-3.0, 0.0, 0.0), 180.0, 0.0),
        ((0.0, -0.5, 0.0), 270.0, 0.0),
        ((1.0, 0.0, 1.0), 0.0, 45.0),
        ((-1.0, -1.0, 0.0), 225.0, 0.0),
    ]
    for xyz, ra, dec in cases:
        pos = to_spherical(GeocentricEquatorial(*xyz))
        assert pos.right_ascension_deg == pytest.approx(ra, abs=1e-12), xyz
        assert pos.declination_deg == pytest.approx(dec, abs=1e-12), xyz


def test_negative_right_ascension_wraps() -> None:
    """Fourth quadrant (y < 0 < x) gives RA in (270, 360)."""
    pos = to_spherical(GeocentricEquatorial(1.0, -1.0, 0.0))
    assert pos.right_ascension_deg == pytest.approx(315.0)


def test_right_ascension_never_reaches_360() -> None:
    """A tiny negative angle that rounds to 360 folds to 0."""
    pos = to_spherical(GeocentricEquatorial(1.0, -1e-20, 0.0))
    assert pos.right_ascension_deg == 0.0


def test_celestial_poles_have_zero_right_ascension() -> None:
    north = to_spherical(GeocentricEquatorial(0.0, 0.0, 5.0))
    south = to_spherical(GeocentricEquatorial(0.0, 0.0, -0.1))
    origin = to_spherical(GeocentricEquatorial(0.0, 0.0, 0.0))
    assert north == SphericalPosition(0.0, 90.0)
    assert south == SphericalPosition(0.0, -90.0)
    assert origin == SphericalPosition(0.0, 0.0)


def test_near_pole_declination_is_accurate() -> None:
    """atan2 keeps precision where asin(z/r) would not."""
    pos = to_spherical(GeocentricEquatorial(1e-12, 0.0, 1.0))
    assert 90.0 - pos.declination_deg == pytest.approx(math.degrees(1e-12), rel=1e-3)


def test_ranges_for_random_vectors() -> None:
    rng = random.Random(7)
    for _ in range(500):
        vec = GeocentricEquatorial(
            rng.uniform(-50.0, 50.0), rng.uniform(-50.0, 50.0), rng.uniform(-50.0, 50.0)
        )
        pos = to_spherical(vec)
        assert 0.0 <= pos.right_ascension_deg < 360.0
        assert -90.0 <= pos.declination_deg <= 90.0


def test_from_spherical_inverts_to_spherical() -> None:
    for ra, dec in ((10.0, 20.0), (200.0, -75.5), (359.5, 0.25)):
        vec = from_spherical(SphericalPosition(ra, dec), distance=4.2)
        assert vec.norm() == pytest.approx(4.2)
        back = to_spherical(vec)
        assert back.right_ascension_deg == pytest.approx(ra, abs=1e-9)
        assert back.declination_deg == pytest.approx(dec, abs=1e-9)


def test_rejects_ecliptic_vector() -> None:
    from planet_radec.frames import GeocentricEcliptic

    with pytest.raises(TypeError):
        to_spherical(GeocentricEcliptic(1.0, 0.0, 0.0))  # type: ignore[arg-type]
