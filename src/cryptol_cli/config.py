"""Runtime settings for cryptol-cli.

The command-line surface is fixed, so settings that are not part of a
run's options come from the environment.  The CLI reads a Settings
instance once and passes it down instead of consulting os.environ in
several places.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

ENGINE_VARIABLE = "CRYPTOL_CLI_ENGINE"
LOG_LEVEL_VARIABLE = "CRYPTOL_CLI_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Environment-derived settings for a cryptol-cli run."""

    engine: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        engine = env.get(ENGINE_VARIABLE, "").strip() or None

        log_level = env.get(LOG_LEVEL_VARIABLE, DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = DEFAULT_LOG_LEVEL

        return cls(engine=engine, log_level=log_level)
