"""Merge policy for ``.cryptol`` startup scripts.

Two pure transitions drive the policy while the command line is folded:

* :func:`add_path` — ``Default`` becomes ``Files((path,))``; ``Files``
  gains *path* at the front; ``Disabled`` ignores the request.
* :func:`disable` — every state becomes ``Disabled``.

Once disabled, startup scripts stay disabled for the rest of the run,
and a path is never removed once added.
"""

from __future__ import annotations

from pathlib import Path

from cryptol_cli.core.models import (
    DotConfig,
    DotConfigDefault,
    DotConfigDisabled,
    DotConfigFiles,
)


def disable(state: DotConfig) -> DotConfig:
    """Turn off startup scripts, whatever was requested before."""
    return DotConfigDisabled()


def add_path(path: Path, state: DotConfig) -> DotConfig:
    """Request *path* as an additional startup script."""
    if isinstance(state, DotConfigDisabled):
        return state
    if isinstance(state, DotConfigFiles):
        return DotConfigFiles((path, *state.paths))
    if isinstance(state, DotConfigDefault):
        return DotConfigFiles((path,))
    raise TypeError(f"Unknown startup-script policy: {state!r}")


def describe(state: DotConfig) -> str:
    """Short human-readable rendering used in debug logs."""
    if isinstance(state, DotConfigDisabled):
        return "disabled"
    if isinstance(state, DotConfigFiles):
        return "files: " + ", ".join(str(path) for path in state.paths)
    return "default"
