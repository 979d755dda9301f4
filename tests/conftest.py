"""Shared pytest fixtures and test helpers for prjboard tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from prjboard.app import ProjectBoard
from prjboard.infrastructure.dom import Document, TemplateRenderer
from prjboard.infrastructure.templates import build_template_environment
from prjboard.state.projects import ProjectStore


class AlertRecorder:
    """Alert collaborator that records every message instead of showing it."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def alerts() -> AlertRecorder:
    return AlertRecorder()


@pytest.fixture
def store() -> ProjectStore:
    return ProjectStore()


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the packaged templates."""
    return TemplateRenderer(build_template_environment())


@pytest.fixture
def document(renderer: TemplateRenderer) -> Document:
    """Fresh page with an empty ``#app`` host."""
    return Document.from_template(renderer)


@pytest.fixture
def board(alerts: AlertRecorder) -> ProjectBoard:
    """Fully mounted board whose alerts go to the recorder."""
    return ProjectBoard(alerts)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory so no stray prjboard.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    for name in ("PRJBOARD_CONFIG", "PRJBOARD_JSON_OUTPUT", "PRJBOARD_VERBOSE", "PRJBOARD_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
