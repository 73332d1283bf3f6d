"""Shared pytest fixtures and configuration for the cryptol-cli test suite.

Guidelines
----------
* No engine plugin is ever discovered — engines are faked at the
  ``_load_engine`` seam or built from ``MagicMock`` objects.
* git is never invoked — ``subprocess.run`` is patched in infra tests.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from cryptol_cli.config import Settings
from cryptol_cli.core.models import DotConfig


class FakeReplRunner:
    """REPL runner that calls the startup callback and returns *outcome*."""

    def __init__(self, session: Any | None = None, outcome: int = 0) -> None:
        self.session: Any = session if session is not None else MagicMock()
        self.outcome: int = outcome
        self.calls: list[tuple[DotConfig, Path | None]] = []

    def run(
        self,
        dot_config: DotConfig,
        batch_script: Path | None,
        setup: Callable[[Any], None],
    ) -> int:
        self.calls.append((dot_config, batch_script))
        setup(self.session)
        return self.outcome


class FakeEngine:
    """Engine bundle assembled from mocks and a :class:`FakeReplRunner`."""

    def __init__(self, repl: FakeReplRunner | None = None) -> None:
        self.loader: MagicMock = MagicMock()
        self.loader.load.return_value = "loaded-module"
        self.generator: MagicMock = MagicMock()
        self.repl: FakeReplRunner = repl or FakeReplRunner()


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture()
def installed_engine(
    monkeypatch: pytest.MonkeyPatch, engine: FakeEngine,
) -> FakeEngine:
    """Route ``cli.app`` engine discovery to the fake engine."""
    from cryptol_cli.cli import app as app_module

    monkeypatch.setattr(app_module, "_load_engine", lambda settings: engine)
    return engine
