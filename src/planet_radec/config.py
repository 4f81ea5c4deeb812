"""Configuration: SPICE paths, kernel names and pipeline overrides from environment."""

import os
from pathlib import Path

# Env var overrides with sensible defaults.
DEFAULT_SPICE_PATH = '/var/www/SPICE/'
DEFAULT_KERNELS = ('de440.bsp',)


def get_spice_path() -> str:
    """Return SPICE kernel root directory (SPICE_PATH env var or default).

    Returns:
        Path string.
    """
    return os.environ.get('SPICE_PATH', DEFAULT_SPICE_PATH)


def get_kernel_names() -> list[str]:
    """Return SPK kernel file names to load, relative to the SPICE path.

    Reads PLANET_RADEC_KERNELS as a comma-separated list; blank entries are
    ignored. Falls back to DEFAULT_KERNELS when unset or empty.

    Returns:
        List of file names (or absolute paths) in load order.
    """
    raw = os.environ.get('PLANET_RADEC_KERNELS', '')
    names = [name.strip() for name in raw.split(',') if name.strip()]
    return names or list(DEFAULT_KERNELS)


def get_leapsecs_path() -> str:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Prefers JULIAN_LEAPSECS, then a .tls file under SPICE_PATH. The returned
    path may not exist; the caller falls back to rms-julian's bundled LSK.

    Returns:
        Path string to an LSK file.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    if path:
        return path
    base = Path(get_spice_path())
    for name in ('naif0012.tls', 'naif0011.tls', 'naif0010.tls', 'leapseconds.tls'):
        p = base / name
        if p.exists():
            return str(p)
    return str(base / 'naif0012.tls')


def get_obliquity_override() -> str | None:
    """Return the raw PLANET_RADEC_OBLIQUITY_DEG value, or None when unset."""
    value = os.environ.get('PLANET_RADEC_OBLIQUITY_DEG', '').strip()
    return value or None


def get_rounding_override() -> str | None:
    """Return the raw PLANET_RADEC_ROUNDING value, or None when unset."""
    value = os.environ.get('PLANET_RADEC_ROUNDING', '').strip()
    return value or None
