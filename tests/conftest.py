"""Shared fixtures: a deterministic in-memory ephemeris adapter."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from planet_radec.bodies import Body
from planet_radec.frames import HeliocentricEcliptic


class StubEphemeris:
    """EphemerisAdapter returning fixed heliocentric vectors and recording calls."""

    def __init__(self, vectors: dict[Body, tuple[float, float, float]]) -> None:
        self.vectors = vectors
        self.calls: list[tuple[float, Body]] = []

    def heliocentric_ecliptic_position(self, julian_day: float, body: Body) -> HeliocentricEcliptic:
        self.calls.append((julian_day, body))
        return HeliocentricEcliptic(*self.vectors[body])


@pytest.fixture
def make_stub_ephemeris() -> Callable[[dict[Body, tuple[float, float, float]]], StubEphemeris]:
    """Factory for StubEphemeris instances."""
    return StubEphemeris


@pytest.fixture(autouse=True)
def _reset_spice_state() -> None:
    """Each test starts with no kernels recorded as loaded."""
    from planet_radec.spice.common import get_state

    get_state().reset()
