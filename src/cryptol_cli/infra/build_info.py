"""Infrastructure: version and source-control details via the git CLI.

Rules
-----
* git is optional — every failure degrades to ``UNKNOWN``.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from cryptol_cli.core.models import BuildInfo
from cryptol_cli.version import __version__

LOG = logging.getLogger(__name__)

UNKNOWN: str = "UNKNOWN"

_PACKAGE_DIR: Path = Path(__file__).resolve().parent

# Repository root of a source checkout: <root>/src/cryptol_cli/infra.
_CHECKOUT_ROOT: Path = _PACKAGE_DIR.parents[2]


class GitBuildInfoProvider:
    """Concrete :class:`~cryptol_cli.core.protocols.VersionProvider`.

    Parameters
    ----------
    source_dir:
        Directory git is run in.  Defaults to the directory holding the
        package sources, so an editable install reports its checkout.
    checkout_root:
        The only repository whose details are reported.  When git finds
        a different enclosing repository (e.g. a virtualenv inside a
        user project), every field degrades to ``UNKNOWN``.
    """

    def __init__(
        self,
        source_dir: Path | None = None,
        checkout_root: Path | None = None,
    ) -> None:
        self._source_dir: Path = source_dir or _PACKAGE_DIR
        self._checkout_root: Path = checkout_root or _CHECKOUT_ROOT

    def current_version(self) -> BuildInfo:
        if not self._in_own_checkout():
            return BuildInfo(
                version=__version__,
                commit_hash=UNKNOWN,
                branch=UNKNOWN,
                dirty=False,
            )
        commit = self._git("rev-parse", "HEAD")
        branch = self._git("rev-parse", "--abbrev-ref", "HEAD")
        status = self._git("status", "--porcelain", "--untracked-files=no")
        return BuildInfo(
            version=__version__,
            commit_hash=commit or UNKNOWN,
            branch=branch or UNKNOWN,
            dirty=bool(status),
        )

    def _in_own_checkout(self) -> bool:
        toplevel = self._git("rev-parse", "--show-toplevel")
        if not toplevel:
            return False
        if Path(toplevel).resolve() != self._checkout_root.resolve():
            LOG.debug("Ignoring enclosing repository %s", toplevel)
            return False
        return True

    def _git(self, *args: str) -> str | None:
        """Run git and return stripped stdout, or ``None`` on any failure."""
        cmd = ["git", *args]
        LOG.debug("Running git command: %s", " ".join(cmd))
        try:
            completed = subprocess.run(
                cmd,
                cwd=self._source_dir,
                check=False,
                text=True,
                capture_output=True,
            )
        except OSError as exc:
            LOG.debug("git unavailable: %s", exc)
            return None

        if completed.returncode != 0:
            LOG.debug("git stderr: %s", completed.stderr)
            return None
        return completed.stdout.strip()
