"""Mode selection and per-mode validation.

Pure functions only: :func:`select_mode` applies the precedence rules
and :func:`build_generation_request` checks the preconditions of code
generation.  Running the selected mode is the CLI layer's job.
"""

from __future__ import annotations

from cryptol_cli.core.models import CodeGenerationRequest, Mode, Options
from cryptol_cli.exceptions import InputFileError


def select_mode(options: Options) -> Mode:
    """Return the one mode *options* ask for.

    Precedence, first match wins: help, version, code generation (a
    generation root is present), batch script, interactive REPL.
    """
    if options.show_help:
        return Mode.HELP
    if options.show_version:
        return Mode.VERSION
    if options.generation_root is not None:
        return Mode.CODE_GENERATE
    if options.batch_script is not None:
        return Mode.RUN_BATCH
    return Mode.INTERACTIVE_REPL


def build_generation_request(options: Options) -> CodeGenerationRequest:
    """Validate *options* for code generation.

    Raises
    ------
    ValueError
        If no generation root is set.
    InputFileError
        Unless exactly one file to load was given.
    """
    if options.generation_root is None:
        raise ValueError("Code generation requires a generation root.")
    if len(options.load_paths) != 1:
        raise InputFileError(
            "Must specify exactly one file to load.",
            hint="Pass the file that defines the root as a positional argument.",
        )
    return CodeGenerationRequest(
        input_file=options.load_paths[0],
        root=options.generation_root,
        target=options.generation_target,
        output_directory=options.output_directory,
    )
