"""Option updates for each command-line flag, and the fold that runs them.

Every public constructor here returns an
:class:`~cryptol_cli.core.accumulator.OptionUpdate`; the CLI layer
collects them in command-line order and hands them to
:func:`parse_options`.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from pathlib import Path

from cryptol_cli.core import dot_config
from cryptol_cli.core.accumulator import OptionUpdate, fold_updates, modify, report
from cryptol_cli.core.models import DEFAULT_OPTIONS, Options, root_from_text
from cryptol_cli.core.targets import resolve_target
from cryptol_cli.exceptions import UnknownTargetError

LOG = logging.getLogger(__name__)


def add_file(path: Path) -> OptionUpdate:
    """Set the single file to load.  A later file replaces an earlier one."""

    def transform(options: Options) -> Options:
        if options.load_paths:
            LOG.debug("Replacing file to load %s with %s", options.load_paths[0], path)
        return dataclasses.replace(options, load_paths=(path,))

    return modify(transform)


def set_batch_script(path: Path) -> OptionUpdate:
    return modify(lambda options: dataclasses.replace(options, batch_script=path))


def set_version() -> OptionUpdate:
    return modify(lambda options: dataclasses.replace(options, show_version=True))


def set_help() -> OptionUpdate:
    return modify(lambda options: dataclasses.replace(options, show_help=True))


def disable_dot_config() -> OptionUpdate:
    """Disable ``.cryptol`` startup scripts."""
    return modify(
        lambda options: dataclasses.replace(
            options, dot_config=dot_config.disable(options.dot_config),
        )
    )


def add_dot_config_script(path: Path) -> OptionUpdate:
    """Add a ``.cryptol`` startup script, unless scripts are disabled."""
    return modify(
        lambda options: dataclasses.replace(
            options, dot_config=dot_config.add_path(path, options.dot_config),
        )
    )


def set_output_directory(path: Path) -> OptionUpdate:
    return modify(lambda options: dataclasses.replace(options, output_directory=path))


def set_generation_root(text: str) -> OptionUpdate:
    """Choose what to generate code for.

    This also signals that code generation should run instead of the
    REPL.
    """
    root = root_from_text(text)
    return modify(lambda options: dataclasses.replace(options, generation_root=root))


def set_target(name: str) -> OptionUpdate:
    """Choose a code generation backend, reporting unknown names."""
    try:
        target = resolve_target(name)
    except UnknownTargetError as exc:
        return report(str(exc))
    return modify(lambda options: dataclasses.replace(options, generation_target=target))


def parse_options(
    updates: Iterable[OptionUpdate],
    defaults: Options = DEFAULT_OPTIONS,
) -> Options:
    """Fold *updates* in order over *defaults*.

    Raises
    ------
    ConfigurationError
        If any update reported an error.
    """
    options = fold_updates(updates).run(defaults)
    LOG.debug(
        "Parsed options: load=%s batch=%s dot-config=%s root=%s target=%s",
        [str(path) for path in options.load_paths],
        options.batch_script,
        dot_config.describe(options.dot_config),
        options.generation_root,
        options.generation_target.value,
    )
    return options
