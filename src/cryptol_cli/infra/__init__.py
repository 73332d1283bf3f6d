"""Infrastructure layer — external system integration.

This layer locates engine plugins through package metadata and reads
build details from git.  Every raw failure must be caught here and
re-raised as a :class:`~cryptol_cli.exceptions.CryptolCliError`
subclass, or degraded to a documented fallback value.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from cryptol_cli.infra.build_info import GitBuildInfoProvider
from cryptol_cli.infra.engine import ENGINE_GROUP, available_engines, load_engine

__all__: list[str] = [
    "ENGINE_GROUP",
    "GitBuildInfoProvider",
    "available_engines",
    "load_engine",
]
