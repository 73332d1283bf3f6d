"""Plain-text help and version output.

Help and version text is written with ``print`` rather than Rich so
that it is never mangled by markup (usage lines contain brackets) and
so that both commands work without any optional dependency.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from cryptol_cli.cli.arguments import build_parser
from cryptol_cli.core.models import BuildInfo

DIRTY_LABEL: str = " (non-committed files present during build)"


def format_help(errors: Sequence[str] = ()) -> str:
    """Return the usage text, preceded by one line per error."""
    lines = [*errors, build_parser().format_help()]
    return "\n".join(lines)


def display_help(errors: Sequence[str] = (), *, file: TextIO | None = None) -> None:
    """Print the usage text, preceded by any *errors*."""
    print(format_help(errors), file=file or sys.stdout, end="")


def format_version(info: BuildInfo) -> str:
    """Render *info* as the three-line version banner."""
    dirty = DIRTY_LABEL if info.dirty else ""
    return "\n".join(
        (
            f"Cryptol {info.version}",
            f"Git commit {info.commit_hash}",
            f"    branch {info.branch}{dirty}",
        )
    )


def display_version(info: BuildInfo, *, file: TextIO | None = None) -> None:
    print(format_version(info), file=file or sys.stdout)
