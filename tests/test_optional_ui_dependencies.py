"""Regression tests for the optional Rich dependency.

These tests verify that help, error reporting and logging keep working
when Rich is missing, and that Rich is used when it is importable.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from cryptol_cli.cli import exit_codes
from cryptol_cli.cli import app as app_module
from cryptol_cli.cli.app import main
from cryptol_cli.cli.console import console
from cryptol_cli.exceptions import EnvironmentError, InputFileError
from cryptol_cli.logging_utils import configure_logging


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Restore the root logger after ``basicConfig(force=True)``."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


# ---------------------------------------------------------------------------
# Console fallback
# ---------------------------------------------------------------------------

class TestConsoleWithoutRich:
    def test_error_and_hint_are_plain_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "cryptol_cli.cli.console._load_rich_console_class",
            side_effect=EnvironmentError("rich is not installed"),
        ):
            console.error("boom", "try --help")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: boom" in captured.err
        assert "Hint: try --help" in captured.err

    def test_error_without_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "cryptol_cli.cli.console._load_rich_console_class",
            side_effect=EnvironmentError("rich is not installed"),
        ):
            console.error("boom")

        assert "Hint:" not in capsys.readouterr().err

    def test_warning_is_plain_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "cryptol_cli.cli.console._load_rich_console_class",
            side_effect=EnvironmentError("rich is not installed"),
        ):
            console.warning("[prelude] failed to load")

        assert "Warning: [prelude] failed to load" in capsys.readouterr().err

    def test_print_falls_back_to_stderr(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        console.print("plain text")
        assert "plain text" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Bootstrap paths
# ---------------------------------------------------------------------------

class TestBootstrapWithoutRich:
    def test_help_works_without_rich(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        assert main(["--help"]) == exit_codes.SUCCESS
        assert "usage: cryptol" in capsys.readouterr().out

    def test_error_boundary_works_without_rich(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        root_logger: logging.Logger,
    ) -> None:
        _hide_rich(monkeypatch)

        def failing_main(settings: object) -> int:
            raise InputFileError("Must specify exactly one file", hint="pass a .cry file")

        monkeypatch.setattr(app_module, "main", failing_main)

        with pytest.raises(SystemExit) as exc_info:
            app_module.cli()

        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error: Must specify exactly one file" in err
        assert "Hint: pass a .cry file" in err


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestConfigureLogging:
    def test_rich_handler_installed_at_requested_level(self, root_logger: logging.Logger) -> None:
        from rich.logging import RichHandler

        configure_logging("DEBUG")

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], RichHandler)

    def test_repeated_calls_replace_handler(self, root_logger: logging.Logger) -> None:
        configure_logging("DEBUG")
        configure_logging("ERROR")

        assert root_logger.level == logging.ERROR
        assert len(root_logger.handlers) == 1

    def test_plain_handler_without_rich(
        self, monkeypatch: pytest.MonkeyPatch, root_logger: logging.Logger,
    ) -> None:
        _hide_rich(monkeypatch)

        configure_logging("INFO")

        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        handler = root_logger.handlers[0]
        assert type(handler) is logging.StreamHandler
        assert handler.stream is sys.stderr
