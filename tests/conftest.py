"""Shared pytest fixtures for domblock tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from domblock.config.settings import DomSettings
from domblock.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config env vars."""
    monkeypatch.delenv("DOMBLOCK_CONFIG", raising=False)
    monkeypatch.delenv("DOMBLOCK_NORMALIZE__EMPTY_LABELS", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by AppContext."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dom = logging.getLogger("domblock")
    dom_level = dom.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dom.setLevel(dom_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def settings(tmp_path: Path) -> DomSettings:
    """Default settings with config discovery rooted at a temp dir."""
    return DomSettings.from_cli(start=tmp_path)


@pytest.fixture
def make_batch(tmp_path: Path) -> Callable[[list[str], list[str]], Path]:
    """Factory writing a batch-protocol input file under tmp_path."""

    def _make(blocked: list[str], queries: list[str]) -> Path:
        lines = [str(len(blocked)), *blocked, str(len(queries)), *queries]
        path = tmp_path / "batch.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _make
