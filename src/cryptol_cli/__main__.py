"""Allow ``python -m cryptol_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cryptol_cli`` behaves identically to the ``cryptol``
console script.
"""

from __future__ import annotations

from cryptol_cli.cli.app import cli

if __name__ == "__main__":
    cli()
