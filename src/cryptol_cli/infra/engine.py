"""Discovery of Cryptol engine plugins through package entry points.

An engine package advertises a zero-argument factory under the
``cryptol_cli.engines`` entry-point group, e.g. in its
``pyproject.toml``::

    [project.entry-points."cryptol_cli.engines"]
    cryptol = "cryptol_engine.plugin:create_engine"

The factory must return an object satisfying
:class:`~cryptol_cli.core.protocols.Engine`.  Every failure while
selecting or building an engine is raised as
:class:`~cryptol_cli.exceptions.EngineNotFoundError`.
"""

from __future__ import annotations

import logging
from importlib import metadata

from cryptol_cli.core.protocols import Engine
from cryptol_cli.exceptions import EngineNotFoundError

LOG = logging.getLogger(__name__)

ENGINE_GROUP: str = "cryptol_cli.engines"

_REQUIRED_ATTRIBUTES: tuple[str, ...] = ("loader", "generator", "repl")

_INSTALL_HINT: str = (
    "Install a package that provides a Cryptol engine under the "
    f"'{ENGINE_GROUP}' entry-point group."
)


def available_engines() -> dict[str, metadata.EntryPoint]:
    """Return installed engine entry points keyed by name."""
    return {entry.name: entry for entry in metadata.entry_points(group=ENGINE_GROUP)}


def load_engine(name: str | None = None) -> Engine:
    """Build the engine called *name*, or the only one installed.

    Raises
    ------
    EngineNotFoundError
        When no engine is installed, *name* is not installed, several
        engines are installed and *name* is ``None``, or the factory
        fails.
    """
    entry = _select_entry(available_engines(), name)
    LOG.debug("Loading engine %r from %s", entry.name, entry.value)
    try:
        factory = entry.load()
        engine = factory()
    except Exception as exc:
        raise EngineNotFoundError(
            f"Engine {entry.name!r} failed to initialise: {exc}",
        ) from exc

    missing = [attr for attr in _REQUIRED_ATTRIBUTES if not hasattr(engine, attr)]
    if missing:
        raise EngineNotFoundError(
            f"Engine {entry.name!r} is missing: {', '.join(missing)}",
        )
    return engine


def _select_entry(
    entries: dict[str, metadata.EntryPoint],
    name: str | None,
) -> metadata.EntryPoint:
    if not entries:
        raise EngineNotFoundError("No Cryptol engine is installed.", hint=_INSTALL_HINT)

    choices = ", ".join(sorted(entries))
    if name is not None:
        try:
            return entries[name]
        except KeyError:
            raise EngineNotFoundError(
                f"Cryptol engine {name!r} is not installed.",
                hint=f"Installed engines: {choices}",
            ) from None

    if len(entries) > 1:
        raise EngineNotFoundError(
            "Several Cryptol engines are installed.",
            hint=f"Choose one with CRYPTOL_CLI_ENGINE ({choices}).",
        )
    return next(iter(entries.values()))
