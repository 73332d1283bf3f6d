"""Domain models for cryptol-cli.

All models are **frozen** dataclasses or enums — immutable value
objects with no behaviour beyond data access.  They carry zero I/O,
zero dependencies on external packages, and must remain pure across
the entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


# ---------------------------------------------------------------------------
# .cryptol startup-script policy
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DotConfigDefault:
    """No startup scripts requested; the engine reads its usual ``.cryptol``."""


@dataclass(frozen=True, slots=True)
class DotConfigDisabled:
    """Reading of ``.cryptol`` startup scripts is switched off."""


@dataclass(frozen=True, slots=True)
class DotConfigFiles:
    """Explicitly requested startup scripts, most recently added first."""

    paths: tuple[Path, ...]


DotConfig = Union[DotConfigDefault, DotConfigDisabled, DotConfigFiles]


# ---------------------------------------------------------------------------
# Code generation
# ---------------------------------------------------------------------------

class GenerationTarget(enum.Enum):
    """Code generation backends, keyed by their canonical name."""

    SBV_C = "sbv-c"


DEFAULT_TARGET: GenerationTarget = GenerationTarget.SBV_C


@dataclass(frozen=True, slots=True)
class IdentifierRoot:
    """Generate code for a single top-level identifier."""

    name: str


@dataclass(frozen=True, slots=True)
class ModuleRoot:
    """Generate code for every definition of a module."""

    name: str


@dataclass(frozen=True, slots=True)
class FileRoot:
    """Generate code for the module defined in a file."""

    path: Path


@dataclass(frozen=True, slots=True)
class DirectoryRoot:
    """Generate code for every module found under a directory."""

    path: Path


GenerationRoot = Union[IdentifierRoot, ModuleRoot, FileRoot, DirectoryRoot]


def root_from_text(text: str) -> GenerationRoot:
    """Interpret a ``--root`` argument.

    The argument is always read as an identifier; module, file and
    directory roots are never inferred from its shape.
    """
    return IdentifierRoot(text)


# ---------------------------------------------------------------------------
# Accumulated command-line options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Options:
    """Configuration produced by folding the command line."""

    load_paths: tuple[Path, ...] = ()
    """Files to load.  Holds at most one entry."""

    show_version: bool = False
    show_help: bool = False

    batch_script: Path | None = None
    """Script to run non-interactively instead of the prompt."""

    dot_config: DotConfig = field(default_factory=DotConfigDefault)

    output_directory: Path | None = None
    """Destination for generated code, ``None`` meaning standard output."""

    generation_root: GenerationRoot | None = None
    """What to generate code for.  Its presence selects code generation."""

    generation_target: GenerationTarget = DEFAULT_TARGET


DEFAULT_OPTIONS: Options = Options()


# ---------------------------------------------------------------------------
# Execution modes
# ---------------------------------------------------------------------------

class Mode(enum.Enum):
    """The single action a run of the CLI performs."""

    HELP = "help"
    VERSION = "version"
    CODE_GENERATE = "code-generate"
    RUN_BATCH = "run-batch"
    INTERACTIVE_REPL = "interactive-repl"


# ---------------------------------------------------------------------------
# Collaborator payloads
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CodeGenerationRequest:
    """Validated inputs for one code generation run."""

    input_file: Path
    root: GenerationRoot
    target: GenerationTarget
    output_directory: Path | None


@dataclass(frozen=True, slots=True)
class BuildInfo:
    """Version and source-control details of the running toolchain."""

    version: str
    commit_hash: str
    branch: str
    dirty: bool
