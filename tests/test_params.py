"""Tests for pipeline configuration and body parsing."""

from __future__ import annotations

import math

import pytest

from planet_radec.bodies import ALL_BODIES, Body, parse_body
from planet_radec.constants import OBLIQUITY_J2000_DEG
from planet_radec.params import PipelineConfig, parse_rounding, pipeline_config_from_env


def test_pipeline_config_defaults() -> None:
    config = PipelineConfig()
    assert config.obliquity_deg == 23.43922911
    assert config.rounding == 'floor'
    assert config.obliquity_rad == pytest.approx(math.radians(23.43922911))


def test_pipeline_config_rejects_bad_values() -> None:
    with pytest.raises(ValueError, match='rounding'):
        PipelineConfig(rounding='nearest')
    with pytest.raises(ValueError, match='finite'):
        PipelineConfig(obliquity_deg=float('nan'))


def test_parse_rounding() -> None:
    assert parse_rounding(' TRUNC ') == 'trunc'
    with pytest.raises(ValueError):
        parse_rounding('ceil')


def test_pipeline_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('PLANET_RADEC_OBLIQUITY_DEG', raising=False)
    monkeypatch.delenv('PLANET_RADEC_ROUNDING', raising=False)
    assert pipeline_config_from_env() == PipelineConfig()

    monkeypatch.setenv('PLANET_RADEC_OBLIQUITY_DEG', '23.4457889')
    monkeypatch.setenv('PLANET_RADEC_ROUNDING', 'Trunc')
    assert pipeline_config_from_env() == PipelineConfig(obliquity_deg=23.4457889, rounding='trunc')


def test_pipeline_config_from_env_rejects_non_numeric(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('PLANET_RADEC_OBLIQUITY_DEG', 'tilted')
    with pytest.raises(ValueError, match='PLANET_RADEC_OBLIQUITY_DEG'):
        pipeline_config_from_env()


def test_default_obliquity_constant() -> None:
    assert OBLIQUITY_J2000_DEG == 23.43922911


def test_parse_body() -> None:
    assert parse_body('Mars') is Body.MARS
    assert parse_body(' NEPTUNE ') is Body.NEPTUNE
    assert parse_body('1') is Body.MERCURY
    assert parse_body('8') is Body.NEPTUNE
    assert parse_body(Body.VENUS) is Body.VENUS
    with pytest.raises(ValueError, match='Unknown body'):
        parse_body('pluto')


def test_body_ids_and_names() -> None:
    assert len(ALL_BODIES) == 8
    assert Body.EARTH.naif_id == 399
    assert Body.JUPITER.naif_id == 5
    assert Body.URANUS.display_name == 'Uranus'
