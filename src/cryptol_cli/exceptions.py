"""Custom exception hierarchy for cryptol-cli.

All exceptions that cross layer boundaries must inherit from
:class:`CryptolCliError`.  Raw exceptions raised by an engine plugin
must NEVER propagate beyond the core services — they must be caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
CryptolCliError
├── OptionsError
│   ├── UsageError
│   └── ConfigurationError
├── UnknownTargetError
├── InputFileError
├── ModuleLoadError
├── CodeGenerationError
└── EnvironmentError
    └── EngineNotFoundError
"""

from __future__ import annotations

from collections.abc import Iterable


class CryptolCliError(Exception):
    """Base exception for all cryptol-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line options --------------------------------------------------

class OptionsError(CryptolCliError):
    """Raised when the command line cannot be turned into options.

    Carries every collected message so the CLI can report them together
    above the usage text.
    """

    def __init__(self, messages: Iterable[str], *, hint: str | None = None) -> None:
        self.messages: tuple[str, ...] = tuple(messages)
        super().__init__("\n".join(self.messages), hint=hint)


class UsageError(OptionsError):
    """Raised for malformed flag grammar (unknown flag, missing value)."""


class ConfigurationError(OptionsError):
    """Raised when well-formed flags describe an invalid configuration."""


class UnknownTargetError(CryptolCliError):
    """Raised when a backend name matches no known code generation target."""

    def __init__(self, name: str, choices: Iterable[str]) -> None:
        self.name: str = name
        self.choices: tuple[str, ...] = tuple(choices)
        super().__init__(
            f"Unknown backend {name}. Choices are {', '.join(self.choices)}",
        )


# --- Mode preconditions ----------------------------------------------------

class InputFileError(CryptolCliError):
    """Raised when a mode is given the wrong number of files to load."""


# --- Engine collaborators --------------------------------------------------

class ModuleLoadError(CryptolCliError):
    """Raised when the engine fails to parse or type-check a module."""


class CodeGenerationError(CryptolCliError):
    """Raised when the engine fails to generate code."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CryptolCliError):
    """Raised when a required runtime dependency is not available."""


class EngineNotFoundError(EnvironmentError):
    """Raised when no usable Cryptol engine plugin can be selected."""
