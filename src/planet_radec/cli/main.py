"""CLI entry point: planet-radec prints geocentric J2000 RA/Dec for planets on a date."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
from collections.abc import Sequence
from typing import NoReturn, TextIO

from planet_radec.angle_utils import dms_string
from planet_radec.bodies import ALL_BODIES, Body, parse_body
from planet_radec.calendar_date import CalendarDate, calendar_date_from_julian_day, parse_calendar
from planet_radec.ephemeris import SpiceEphemeris
from planet_radec.params import PipelineConfig, parse_rounding, pipeline_config_from_env
from planet_radec.pipeline import PlanetPosition, PositionPipeline
from planet_radec.time_utils import calendar_date_from_string

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or PLANET_RADEC_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('PLANET_RADEC_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _date_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> CalendarDate:
    """Build the CalendarDate from --date or --year/--month/--day."""
    calendar = parse_calendar(args.calendar)
    explicit = (args.year, args.month, args.day)
    if args.date is not None:
        if any(v is not None for v in explicit):
            parser.error('--date cannot be combined with --year/--month/--day')
        if args.calendar != 'gregorian':
            parser.error('--date is always Gregorian; use --year/--month/--day for Julian dates')
        return calendar_date_from_string(args.date)
    if any(v is None for v in explicit):
        parser.error('either --date or all of --year, --month, --day is required')
    return CalendarDate(year=args.year, month=args.month, day=args.day, calendar=calendar)


def _config_from_args(args: argparse.Namespace) -> PipelineConfig:
    """Environment config with CLI overrides applied."""
    config = pipeline_config_from_env()
    if args.obliquity is not None:
        config = dataclasses.replace(config, obliquity_deg=args.obliquity)
    if args.rounding is not None:
        config = dataclasses.replace(config, rounding=args.rounding)
    return config


def write_position(out: TextIO, position: PlanetPosition) -> None:
    """Write one body's block: name, declination, right ascension, blank line."""
    ra = position.right_ascension
    out.write(f'Planet: {position.body.display_name}\n')
    out.write(
        f'declination     (J2000): {position.declination_deg:.6f} degrees '
        f'({dms_string(position.declination_deg, "dms", 1).strip()})\n'
    )
    out.write(
        f'right ascension (J2000): {ra.hours} hr {ra.minutes} min {ra.seconds} sec\n'
    )
    out.write('\n')


def _radec_cmd(
    parser: argparse.ArgumentParser, args: argparse.Namespace, out: TextIO
) -> int:
    """Compute and print positions.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        date = _date_from_args(parser, args)
        config = _config_from_args(args)
        bodies: Sequence[Body] = args.bodies or ALL_BODIES
        pipeline = PositionPipeline(SpiceEphemeris(), config)
        jd = date.julian_day(config.rounding)
        logger.info(
            'Date %s -> JD %.6f (instant %s)',
            date,
            jd,
            calendar_date_from_julian_day(jd, date.calendar),
        )
        positions = [pipeline.position_at_julian_day(jd, body) for body in bodies]
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    out.write(f'julian day             : {jd} \n')
    for position in positions:
        write_position(out, position)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Return the planet-radec argument parser."""
    parser = argparse.ArgumentParser(
        prog='planet-radec',
        description='Geocentric J2000 right ascension and declination of the planets.',
    )
    parser.add_argument(
        '--date',
        type=str,
        default=None,
        help='UTC date/time, e.g. "2021-06-28 23:02:24" (Gregorian)',
    )
    parser.add_argument('--year', type=int, default=None, help='Calendar year')
    parser.add_argument('--month', type=int, default=None, help='Month 1-12')
    parser.add_argument(
        '--day', type=float, default=None, help='Day of month; fraction is UTC time of day'
    )
    parser.add_argument(
        '--calendar',
        type=str,
        default='gregorian',
        choices=['gregorian', 'julian'],
        help='Calendar of --year/--month/--day',
    )
    parser.add_argument(
        '--body',
        dest='bodies',
        type=parse_body,
        nargs='+',
        default=None,
        help='Body names or numbers (1=mercury .. 8=neptune); default all',
    )
    parser.add_argument(
        '--obliquity',
        type=float,
        default=None,
        help='Obliquity of the ecliptic (deg); env: PLANET_RADEC_OBLIQUITY_DEG',
    )
    parser.add_argument(
        '--rounding',
        type=parse_rounding,
        default=None,
        help='Julian Day rounding: floor or trunc; env: PLANET_RADEC_ROUNDING',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    return parser


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Entry point for planet-radec.

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(verbose=args.verbose)
    return _radec_cmd(parser, args, out if out is not None else sys.stdout)


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
