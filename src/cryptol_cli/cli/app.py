"""CLI application entry point and command routing for cryptol-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cryptol_cli.exceptions.CryptolCliError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — option folding, mode selection and
  mode validation are delegated to the core layer.
* Exactly one collaborator runs per invocation: help, version, the code
  generator, or the REPL runner.
* Engines are discovered lazily, so help, version and option errors
  never touch the plugin machinery.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from cryptol_cli.cli import exit_codes
from cryptol_cli.cli.arguments import parse_arguments
from cryptol_cli.cli.console import console
from cryptol_cli.cli.display import display_help, display_version
from cryptol_cli.config import Settings
from cryptol_cli.core.models import Mode, Options
from cryptol_cli.core.modes import select_mode
from cryptol_cli.core.protocols import Engine
from cryptol_cli.exceptions import CryptolCliError, OptionsError
from cryptol_cli.logging_utils import configure_logging

LOG = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _load_engine(settings: Settings) -> Engine:
    """Discover the engine plugin selected by *settings*."""
    from cryptol_cli.infra.engine import load_engine

    return load_engine(settings.engine)


def _handle_version() -> int:
    """Print version and build information."""
    from cryptol_cli.infra.build_info import GitBuildInfoProvider

    display_version(GitBuildInfoProvider().current_version())
    return exit_codes.SUCCESS


def _handle_code_generation(options: Options, settings: Settings) -> int:
    """Load the single input module and generate code for it.

    Flow:
    1. Validate the file count (before any engine is touched).
    2. Discover the engine.
    3. Load the module; stop on failure.
    4. Generate code with the chosen backend and output directory.
    """
    from cryptol_cli.core.codegen_service import CodeGenerationService
    from cryptol_cli.core.modes import build_generation_request

    request = build_generation_request(options)
    engine = _load_engine(settings)
    CodeGenerationService(engine.loader, engine.generator).run(request)
    return exit_codes.SUCCESS


def _handle_repl(options: Options, settings: Settings) -> int:
    """Start an interactive session, or run the batch script."""
    from cryptol_cli.core.repl_service import ReplService

    engine = _load_engine(settings)
    return ReplService(engine.repl, console.warning).start(options)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """Run the cryptol CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    settings:
        Environment settings.  Read from ``os.environ`` when ``None``.

    Returns
    -------
    int
        OS process exit code.
    """
    settings = settings or Settings.from_env()

    try:
        options = parse_arguments(argv)
    except OptionsError as exc:
        display_help(exc.messages, file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    mode = select_mode(options)
    LOG.debug("Selected mode: %s", mode.value)

    if mode is Mode.HELP:
        display_help()
        return exit_codes.SUCCESS
    if mode is Mode.VERSION:
        return _handle_version()
    if mode is Mode.CODE_GENERATE:
        return _handle_code_generation(options, settings)
    return _handle_repl(options, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    try:
        code = main(settings=settings)
        sys.exit(code)
    except CryptolCliError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        LOG.debug("Unexpected error", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
