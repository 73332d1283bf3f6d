"""Resolution of backend names to :class:`GenerationTarget` values.

Matching is exact against the canonical names; there are no partial
matches and no suggestions beyond the list of valid choices.
"""

from __future__ import annotations

from cryptol_cli.core.models import GenerationTarget
from cryptol_cli.exceptions import UnknownTargetError


def known_targets() -> tuple[str, ...]:
    """Canonical backend names, in declaration order."""
    return tuple(target.value for target in GenerationTarget)


def resolve_target(name: str) -> GenerationTarget:
    """Return the backend called *name*.

    Raises
    ------
    UnknownTargetError
        If *name* is not a canonical backend name.
    """
    for target in GenerationTarget:
        if target.value == name:
            return target
    raise UnknownTargetError(name, known_targets())
