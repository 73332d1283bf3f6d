"""Core code generation service — load one module, then generate.

This service delegates to a :class:`~cryptol_cli.core.protocols.ModuleLoader`
and a :class:`~cryptol_cli.core.protocols.CodeGenerator` injected at
construction time.  It is responsible for:

* Loading the single input module exactly once.
* Refusing to generate anything when loading fails.
* Ensuring only :class:`~cryptol_cli.exceptions.CryptolCliError`
  subclasses escape.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
"""

from __future__ import annotations

import logging
from typing import Any

from cryptol_cli.core.models import CodeGenerationRequest
from cryptol_cli.core.protocols import CodeGenerator, ModuleLoader
from cryptol_cli.exceptions import CodeGenerationError, CryptolCliError, ModuleLoadError

LOG = logging.getLogger(__name__)


class CodeGenerationService:
    """Stateless service that drives one code generation run.

    Parameters
    ----------
    loader:
        Any object satisfying the :class:`ModuleLoader` protocol.
    generator:
        Any object satisfying the :class:`CodeGenerator` protocol.
    """

    def __init__(self, loader: ModuleLoader, generator: CodeGenerator) -> None:
        self._loader: ModuleLoader = loader
        self._generator: CodeGenerator = generator

    def run(self, request: CodeGenerationRequest) -> None:
        """Load ``request.input_file`` and generate code for it.

        Raises
        ------
        ModuleLoadError
            When the input module fails to load.  No generation is
            attempted.
        CodeGenerationError
            When the generator fails.
        """
        module = self._load(request)
        destination = request.output_directory or "<stdout>"
        LOG.debug(
            "Generating %s code for %s into %s",
            request.target.value,
            request.root,
            destination,
        )
        try:
            self._generator.generate(
                request.output_directory,
                request.root,
                request.target,
                module,
            )
        except CryptolCliError:
            raise
        except Exception as exc:
            raise CodeGenerationError(
                f"Unexpected code generation error: {exc}",
            ) from exc

    def _load(self, request: CodeGenerationRequest) -> Any:
        """Call the loader and ensure only our exceptions escape."""
        LOG.debug("Loading module %s", request.input_file)
        try:
            return self._loader.load(request.input_file)
        except CryptolCliError:
            raise
        except Exception as exc:
            raise ModuleLoadError(
                f"Unexpected error loading {request.input_file}: {exc}",
            ) from exc
