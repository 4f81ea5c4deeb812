"""SPICE kernel loading for the planetary ephemeris."""

from __future__ import annotations

import logging
from pathlib import Path

import cspyce

from planet_radec.config import get_kernel_names, get_spice_path
from planet_radec.spice.common import get_state

logger = logging.getLogger(__name__)


def _resolve_kernel_paths(names: list[str]) -> tuple[list[str] | None, str | None]:
    """Resolve kernel names against SPICE_PATH; returns (paths, None) or (None, reason)."""
    base = Path(get_spice_path())
    paths: list[str] = []
    for name in names:
        kpath = Path(name)
        if not kpath.is_absolute():
            if not base.is_dir():
                return (None, f'SPICE_PATH is not a directory: {base}')
            kpath = base / name
        paths.append(str(kpath))
    return (paths, None)


def load_ephemeris_kernels(kernel_names: list[str] | None = None) -> tuple[bool, str | None]:
    """Furnish the planetary SPK kernels, once per process.

    Returns (True, None) if loaded (or the same kernels are already loaded),
    (False, reason) on failure or when different kernels are already loaded.
    A failed load unloads any kernel it furnished, leaving the pool unchanged.

    kernel_names: file names relative to SPICE_PATH, or absolute paths;
        None uses PLANET_RADEC_KERNELS (default de440.bsp).
    """
    state = get_state()
    names = kernel_names if kernel_names is not None else get_kernel_names()
    if not names:
        return (False, 'No ephemeris kernels configured')
    paths, reason = _resolve_kernel_paths(names)
    if paths is None:
        return (False, reason)
    if state.kernels_loaded:
        if paths == state.kernel_paths:
            return (True, None)
        return (
            False,
            f'SPICE already loaded with different ephemeris kernels: '
            f'{", ".join(state.kernel_paths)}',
        )
    loaded: list[str] = []
    missing: list[str] = []
    for kpath in paths:
        if not Path(kpath).exists():
            logger.warning('Kernel not found: %s', kpath)
            missing.append(kpath)
            continue
        try:
            cspyce.furnsh(kpath)
        except Exception as e:
            logger.warning('Failed to load %s: %s', kpath, e)
            missing.append(kpath)
            continue
        loaded.append(kpath)
    if missing:
        for kpath in loaded:
            cspyce.unload(kpath)
        return (
            False,
            f'Could not load ephemeris kernel(s): {", ".join(missing)}. '
            'Check SPICE_PATH and PLANET_RADEC_KERNELS.',
        )
    state.kernels_loaded = True
    state.kernel_paths = loaded
    logger.info('Loaded ephemeris kernels: %s', ', '.join(loaded))
    return (True, None)
