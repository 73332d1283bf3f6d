"""Logging helpers for cryptol-cli.

Log records go to stderr so they never mix with generated code written
to standard output.  Rich renders them when it is importable; otherwise
a plain stream handler is used.
"""

from __future__ import annotations

import logging


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger at the given level name.

    Calling this more than once replaces the handlers installed by the
    previous call.
    """
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(
            level=level,
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )
        return

    from rich.console import Console

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        log_time_format="[%X]",
    )
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
