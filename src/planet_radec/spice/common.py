"""Shared state for the SPICE layer (the kernel pool is process-global)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SpiceState:
    """Kernels furnished to the SPICE pool by this process.

    Modified by load_ephemeris_kernels; reset() is for tests and reloads.
    """

    kernels_loaded: bool = False
    kernel_paths: list[str] = field(default_factory=list)

    def reset(self) -> None:
        """Forget loaded kernels (does not unload them from SPICE)."""
        self.kernels_loaded = False
        self.kernel_paths = []


# Module-level singleton
_state = SpiceState()


def get_state() -> SpiceState:
    """Return the global SpiceState instance."""
    return _state
