"""Tests for rms-julian time wrappers."""

from __future__ import annotations

import pytest

from planet_radec import time_utils
from planet_radec.calendar_date import CalendarSystem


def test_ensure_leapsecs_sets_spice_ut_model(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leap-second init selects the SPICE UT model before loading the LSK."""

    calls: list[tuple[str, tuple[object, ...]]] = []

    def _set_ut_model(model: str, future: object = None) -> None:
        del future
        calls.append(('set_ut_model', (model,)))

    def _load_lsk(path: str | None = None) -> None:
        calls.append(('load_lsk', (path,)))

    monkeypatch.setattr('julian.set_ut_model', _set_ut_model)
    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('planet_radec.time_utils.get_leapsecs_path', lambda: 'dummy.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert calls == [('set_ut_model', ('SPICE',)), ('load_lsk', ('dummy.tls',))]


def test_ensure_leapsecs_falls_back_to_bundled(monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing configured LSK falls back to rms-julian's bundled file."""

    paths: list[str | None] = []

    def _load_lsk(path: str | None = None) -> None:
        paths.append(path)
        if path is not None:
            raise OSError(f'No such file: {path}')

    monkeypatch.setattr('julian.set_ut_model', lambda model, future=None: None)
    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('planet_radec.time_utils.get_leapsecs_path', lambda: '/missing/naif0012.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert paths == ['/missing/naif0012.tls', None]
    assert time_utils._leapsecs_loaded is True


def test_day_sec_from_julian_day() -> None:
    """J2000.0 is noon of day 0; day numbers count from 2000-01-01."""
    assert time_utils.day_sec_from_julian_day(2451545.0) == (0, 43200.0)
    assert time_utils.day_sec_from_julian_day(2451544.5) == (0, 0.0)
    day, sec = time_utils.day_sec_from_julian_day(2451544.25)
    assert day == -1
    assert sec == pytest.approx(64800.0)


def test_et_from_julian_day_chains_utc_tai_tdb(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def _tai(day: int, sec: float) -> float:
        seen['day_sec'] = (day, sec)
        return 1000.0

    def _tdb(tai: float) -> float:
        seen['tai'] = tai
        return 1032.184

    monkeypatch.setattr(time_utils, 'tai_from_day_sec', _tai)
    monkeypatch.setattr(time_utils, 'tdb_from_tai', _tdb)

    assert time_utils.et_from_julian_day(2451546.0) == 1032.184
    assert seen == {'day_sec': (1, 43200.0), 'tai': 1000.0}


def test_parse_datetime_accepts_iso_z_suffix() -> None:
    """ISO-8601 trailing Z parses as UTC like the same timestamp without Z."""

    with_z = time_utils.parse_datetime('2022-08-18T00:01:47Z')
    without_z = time_utils.parse_datetime('2022-08-18T00:01:47')

    assert with_z is not None
    assert with_z == without_z


def test_parse_datetime_accepts_year_hms_form() -> None:
    """'YYYY HH:MM:SS' parses as Jan 1 of that year at the given time."""

    compact = time_utils.parse_datetime('1700 01:01:01')
    explicit = time_utils.parse_datetime('1700-01-01 01:01:01')

    assert compact is not None
    assert compact == explicit


def test_calendar_date_from_string() -> None:
    date = time_utils.calendar_date_from_string('2021-06-28 23:02:24')

    assert (date.year, date.month) == (2021, 6)
    assert date.day == pytest.approx(28.96)
    assert date.calendar is CalendarSystem.GREGORIAN
    assert date.julian_day() == pytest.approx(2459394.46, abs=1e-9)


def test_calendar_date_from_string_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(time_utils, 'parse_datetime', lambda s: None)
    with pytest.raises(ValueError, match='Could not parse'):
        time_utils.calendar_date_from_string('next tuesday')
