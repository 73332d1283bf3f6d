"""cryptol-cli — command-line front-end for the Cryptol toolchain.

Parses the command line into an immutable configuration, selects one
execution mode, and hands control to an installed Cryptol engine.
"""

from cryptol_cli.version import __version__

__all__: list[str] = ["__version__"]
