"""Composable, error-accumulating updates over :class:`Options`.

Each command-line flag becomes one :class:`OptionUpdate`.  Updates
compose with ``+`` (the left operand runs first) and
:meth:`OptionUpdate.neutral` is the identity, so a whole command line
folds into a single update applied once to the default options.

Errors never short-circuit the fold: every update still runs so that
all semantic problems of a command line are reported together.
"""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from cryptol_cli.core.models import Options
from cryptol_cli.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# Error accumulator
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ErrorReport:
    """Ordered collection of human-readable error messages."""

    messages: tuple[str, ...] = ()

    def __add__(self, other: ErrorReport) -> ErrorReport:
        return ErrorReport(self.messages + other.messages)

    def __bool__(self) -> bool:
        return len(self.messages) > 0

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


Step = Callable[[Options, ErrorReport], tuple[Options, ErrorReport]]


def _identity(options: Options, errors: ErrorReport) -> tuple[Options, ErrorReport]:
    return options, errors


# ---------------------------------------------------------------------------
# Option updates
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionUpdate:
    """A pure transformation of the options/error pair."""

    step: Step = _identity

    @classmethod
    def neutral(cls) -> OptionUpdate:
        """Return the update that changes nothing."""
        return cls()

    def __add__(self, other: OptionUpdate) -> OptionUpdate:
        first, second = self.step, other.step

        def composed(options: Options, errors: ErrorReport) -> tuple[Options, ErrorReport]:
            return second(*first(options, errors))

        return OptionUpdate(composed)

    def apply(self, options: Options) -> tuple[Options, ErrorReport]:
        """Run the update from *options* with no prior errors."""
        return self.step(options, ErrorReport())

    def run(self, options: Options) -> Options:
        """Run the update and return the final options.

        Raises
        ------
        ConfigurationError
            Carrying every message reported during the run, in order.
        """
        final, errors = self.apply(options)
        if errors:
            raise ConfigurationError(errors.messages)
        return final


def modify(transform: Callable[[Options], Options]) -> OptionUpdate:
    """Lift a plain options transformation into an update."""

    def step(options: Options, errors: ErrorReport) -> tuple[Options, ErrorReport]:
        return transform(options), errors

    return OptionUpdate(step)


def report(message: str) -> OptionUpdate:
    """Return an update that only records *message* as an error."""
    extra = ErrorReport((message,))

    def step(options: Options, errors: ErrorReport) -> tuple[Options, ErrorReport]:
        return options, errors + extra

    return OptionUpdate(step)


def fold_updates(updates: Iterable[OptionUpdate]) -> OptionUpdate:
    """Concatenate *updates* left to right into one update."""
    return functools.reduce(operator.add, updates, OptionUpdate.neutral())
