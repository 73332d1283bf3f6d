"""Protocols (interfaces) consumed by the core layer.

These define the contracts a Cryptol engine plugin must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol

from cryptol_cli.core.models import BuildInfo, DotConfig, GenerationRoot, GenerationTarget


class ModuleLoader(Protocol):
    """Contract for loading a Cryptol module from a file."""

    def load(self, path: Path) -> Any:
        """Parse and type-check the module at *path*.

        Returns an engine-specific loaded-module object, passed back
        verbatim to :meth:`CodeGenerator.generate`.

        Raises
        ------
        ModuleLoadError
            When the module cannot be parsed or type-checked.
        """
        ...  # pragma: no cover


class CodeGenerator(Protocol):
    """Contract for code generation backends."""

    def generate(
        self,
        output_directory: Path | None,
        root: GenerationRoot,
        target: GenerationTarget,
        module: Any,
    ) -> None:
        """Generate code for *root* of the loaded *module*.

        Parameters
        ----------
        output_directory:
            Destination directory, or ``None`` for standard output.
        root:
            What to generate code for.
        target:
            The backend to generate with.
        module:
            Object returned by :meth:`ModuleLoader.load`.

        Raises
        ------
        CodeGenerationError
            When generation fails for any reason.
        """
        ...  # pragma: no cover


class ReplSession(Protocol):
    """A live REPL, handed to the startup callback before the prompt."""

    def load_prelude(self) -> None:
        """Load the engine's default startup module.

        Raises
        ------
        ModuleLoadError
            When the prelude fails to load.
        """
        ...  # pragma: no cover

    def load_file(self, path: Path) -> None:
        """Load *path* as the current module.

        Raises
        ------
        ModuleLoadError
            When the module fails to load.
        """
        ...  # pragma: no cover


class ReplRunner(Protocol):
    """Contract for the interactive evaluator and batch script runner."""

    def run(
        self,
        dot_config: DotConfig,
        batch_script: Path | None,
        setup: Callable[[ReplSession], None],
    ) -> int:
        """Start a session and return its process exit code.

        *dot_config* governs which ``.cryptol`` startup scripts are read.
        *setup* is called once with the session before the prompt starts
        (or before *batch_script* runs, when one is given).
        """
        ...  # pragma: no cover


class Engine(Protocol):
    """Everything an engine plugin provides to the CLI."""

    loader: ModuleLoader
    generator: CodeGenerator
    repl: ReplRunner


class VersionProvider(Protocol):
    """Contract for version and build metadata retrieval."""

    def current_version(self) -> BuildInfo:
        ...  # pragma: no cover
