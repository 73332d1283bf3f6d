"""Core / service layer — pure option handling and mode orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from cryptol_cli.core.accumulator import ErrorReport, OptionUpdate, fold_updates
from cryptol_cli.core.codegen_service import CodeGenerationService
from cryptol_cli.core.models import (
    DEFAULT_OPTIONS,
    BuildInfo,
    CodeGenerationRequest,
    DotConfig,
    DotConfigDefault,
    DotConfigDisabled,
    DotConfigFiles,
    GenerationRoot,
    GenerationTarget,
    IdentifierRoot,
    Mode,
    Options,
)
from cryptol_cli.core.modes import build_generation_request, select_mode
from cryptol_cli.core.options import parse_options
from cryptol_cli.core.protocols import (
    CodeGenerator,
    Engine,
    ModuleLoader,
    ReplRunner,
    ReplSession,
    VersionProvider,
)
from cryptol_cli.core.repl_service import ReplService
from cryptol_cli.core.targets import known_targets, resolve_target

__all__: list[str] = [
    "BuildInfo",
    "CodeGenerationRequest",
    "CodeGenerationService",
    "CodeGenerator",
    "DEFAULT_OPTIONS",
    "DotConfig",
    "DotConfigDefault",
    "DotConfigDisabled",
    "DotConfigFiles",
    "Engine",
    "ErrorReport",
    "GenerationRoot",
    "GenerationTarget",
    "IdentifierRoot",
    "Mode",
    "ModuleLoader",
    "OptionUpdate",
    "Options",
    "ReplRunner",
    "ReplService",
    "ReplSession",
    "VersionProvider",
    "build_generation_request",
    "fold_updates",
    "known_targets",
    "parse_options",
    "resolve_target",
    "select_mode",
]
