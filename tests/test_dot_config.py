"""Tests for the ``.cryptol`` startup-script merge policy (core/dot_config.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from cryptol_cli.core import dot_config
from cryptol_cli.core.models import DotConfigDefault, DotConfigDisabled, DotConfigFiles


# ---------------------------------------------------------------------------
# add_path
# ---------------------------------------------------------------------------

class TestAddPath:
    def test_default_becomes_single_file(self) -> None:
        state = dot_config.add_path(Path("a.cry"), DotConfigDefault())
        assert state == DotConfigFiles((Path("a.cry"),))

    def test_newest_path_comes_first(self) -> None:
        state = dot_config.add_path(Path("p1"), DotConfigDefault())
        state = dot_config.add_path(Path("p2"), state)
        assert state == DotConfigFiles((Path("p2"), Path("p1")))

    def test_disabled_ignores_new_paths(self) -> None:
        assert dot_config.add_path(Path("p"), DotConfigDisabled()) == DotConfigDisabled()

    def test_unknown_state_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            dot_config.add_path(Path("p"), "default")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# disable
# ---------------------------------------------------------------------------

class TestDisable:
    @pytest.mark.parametrize(
        "state",
        [
            DotConfigDefault(),
            DotConfigDisabled(),
            DotConfigFiles((Path("a"), Path("b"))),
        ],
    )
    def test_every_state_becomes_disabled(self, state: object) -> None:
        assert dot_config.disable(state) == DotConfigDisabled()  # type: ignore[arg-type]

    def test_disabled_is_absorbing(self) -> None:
        state = dot_config.disable(DotConfigDefault())
        state = dot_config.add_path(Path("p"), state)
        state = dot_config.disable(state)
        assert state == DotConfigDisabled()


# ---------------------------------------------------------------------------
# describe
# ---------------------------------------------------------------------------

class TestDescribe:
    def test_renderings(self) -> None:
        assert dot_config.describe(DotConfigDefault()) == "default"
        assert dot_config.describe(DotConfigDisabled()) == "disabled"
        assert dot_config.describe(DotConfigFiles((Path("a"),))) == "files: a"
