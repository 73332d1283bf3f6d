"""Core REPL service — start an interactive or batch session.

The service builds the startup callback handed to the injected
:class:`~cryptol_cli.core.protocols.ReplRunner`: it loads the prelude
or the single requested file and treats load failures as warnings.
A broken startup module never prevents the session from starting.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from cryptol_cli.core.models import Options
from cryptol_cli.core.protocols import ReplRunner, ReplSession
from cryptol_cli.exceptions import ModuleLoadError

LOG = logging.getLogger(__name__)

Reporter = Callable[[str], None]


class ReplService:
    """Drives one REPL or batch session.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ReplRunner` protocol.
    report:
        Callable that shows a non-fatal problem to the user.
    """

    def __init__(self, runner: ReplRunner, report: Reporter) -> None:
        self._runner: ReplRunner = runner
        self._report: Reporter = report

    def start(self, options: Options) -> int:
        """Run the session described by *options* and return its exit code."""
        if options.batch_script is not None:
            LOG.debug("Running batch script %s", options.batch_script)
        return self._runner.run(
            options.dot_config,
            options.batch_script,
            self.startup(options.load_paths),
        )

    def startup(self, load_paths: tuple[Path, ...]) -> Callable[[ReplSession], None]:
        """Return the callback that loads the startup module."""

        def setup(session: ReplSession) -> None:
            if not load_paths:
                self._guarded("the prelude", session.load_prelude)
            elif len(load_paths) == 1:
                path = load_paths[0]
                self._guarded(str(path), lambda: session.load_file(path))
            else:
                self._report("Only one file may be loaded at the command line.")

        return setup

    def _guarded(self, what: str, action: Callable[[], None]) -> None:
        try:
            action()
        except ModuleLoadError as exc:
            LOG.warning("Failed to load %s: %s", what, exc)
            self._report(str(exc))
        except Exception as exc:
            LOG.warning("Unexpected error loading %s", what, exc_info=True)
            self._report(f"Unexpected error loading {what}: {exc}")
