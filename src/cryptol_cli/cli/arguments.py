"""Command-line grammar for the ``cryptol`` executable.

``argparse`` performs the syntactic pass only: every recognised flag
is recorded, in command-line order, as an
:class:`~cryptol_cli.core.accumulator.OptionUpdate`.  Interpreting the
updates (and collecting semantic errors) is left to
:func:`~cryptol_cli.core.options.parse_options`.

Help and version are ordinary flags here rather than argparse's
exiting actions, so that they obey the mode precedence rules.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, NoReturn

from cryptol_cli.core import options as opt
from cryptol_cli.core.accumulator import OptionUpdate
from cryptol_cli.core.models import DEFAULT_TARGET, Options
from cryptol_cli.exceptions import UsageError

PROG: str = "cryptol"

_UPDATES: str = "updates"


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError([message])


class _FlagAction(argparse.Action):
    """Record a flag without a value as an option update."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        *,
        update: Callable[[], OptionUpdate],
        **kwargs: Any,
    ) -> None:
        super().__init__(option_strings, dest, nargs=0, **kwargs)
        self._update = update

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        _record(namespace, self.dest, self._update())


class _ValueAction(argparse.Action):
    """Record a flag with one value as an option update."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        *,
        update: Callable[[Any], OptionUpdate],
        **kwargs: Any,
    ) -> None:
        super().__init__(option_strings, dest, **kwargs)
        self._update = update

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        _record(namespace, self.dest, self._update(values))


def _record(namespace: argparse.Namespace, dest: str, update: OptionUpdate) -> None:
    # Copy rather than append: argparse shares defaults between parses.
    recorded = list(getattr(namespace, dest, None) or [])
    recorded.append(update)
    setattr(namespace, dest, recorded)


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = _ArgumentParser(
        prog=PROG,
        usage="%(prog)s [OPTIONS] [FILE]",
        description="Cryptol interpreter, batch runner, and code generator.",
        add_help=False,
    )
    parser.set_defaults(**{_UPDATES: None})

    parser.add_argument(
        "-b", "--batch",
        dest=_UPDATES, action=_ValueAction, metavar="FILE", type=Path,
        update=opt.set_batch_script,
        help="run the script provided and exit",
    )
    parser.add_argument(
        "-v", "--version",
        dest=_UPDATES, action=_FlagAction,
        update=opt.set_version,
        help="display version number",
    )
    parser.add_argument(
        "-h", "--help",
        dest=_UPDATES, action=_FlagAction,
        update=opt.set_help,
        help="display this message",
    )
    parser.add_argument(
        "--ignore-dot-cryptol",
        dest=_UPDATES, action=_FlagAction,
        update=opt.disable_dot_config,
        help="disable reading of .cryptol files",
    )
    parser.add_argument(
        "--cryptol-script",
        dest=_UPDATES, action=_ValueAction, metavar="FILE", type=Path,
        update=opt.add_dot_config_script,
        help="read additional .cryptol files",
    )
    parser.add_argument(
        "-o", "--output-dir",
        dest=_UPDATES, action=_ValueAction, metavar="DIR", type=Path,
        update=opt.set_output_directory,
        help="output directory for code generation (default stdout)",
    )
    parser.add_argument(
        "--root",
        dest=_UPDATES, action=_ValueAction, metavar="UNIT",
        update=opt.set_generation_root,
        help="generate code for the specified identifier, module, file, or directory",
    )
    parser.add_argument(
        "-t", "--target",
        dest=_UPDATES, action=_ValueAction, metavar="BACKEND",
        update=opt.set_target,
        help=f"code generation backend (default {DEFAULT_TARGET.value})",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        metavar="FILE",
        help="file to load (only one file may be loaded)",
    )
    return parser


def collect_updates(
    parser: argparse.ArgumentParser,
    argv: Sequence[str] | None,
) -> list[OptionUpdate]:
    """Run the syntactic pass and return updates in command-line order.

    Positional files are appended after the flags; only their relative
    order matters, since nothing else reads the file slot.  Every token
    after the first ``--`` is a file, even when it starts with a dash.

    Raises
    ------
    UsageError
        On an unknown flag or a flag missing its value.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    trailing: list[str] = []
    if "--" in args:
        split = args.index("--")
        args, trailing = args[:split], args[split + 1:]

    namespace = parser.parse_intermixed_args(args)
    files = [*(getattr(namespace, "files", None) or []), *map(Path, trailing)]
    updates: list[OptionUpdate] = list(getattr(namespace, _UPDATES) or [])
    updates.extend(opt.add_file(path) for path in files)
    return updates


def parse_arguments(argv: Sequence[str] | None = None) -> Options:
    """Turn *argv* into validated :class:`Options`.

    Raises
    ------
    UsageError
        On malformed flag grammar.
    ConfigurationError
        On well-formed but invalid flags, with every message collected.
    """
    return opt.parse_options(collect_updates(build_parser(), argv))
