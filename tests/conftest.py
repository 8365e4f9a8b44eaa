"""Shared pytest fixtures and test helpers for jcreate tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator, Sequence
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from jcreate.config.settings import JcreateSettings
from jcreate.infrastructure.workspace import Workspace


@pytest.fixture(autouse=True)
def _isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep the developer's own jcreate config and env out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    for var in [name for name in os.environ if name.startswith("JCREATE_")]:
        monkeypatch.delenv(var)


@pytest.fixture(autouse=True)
def _restore_root_handlers() -> Generator[None]:
    """Drop the stderr handler a CLI invocation installs on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A Maven-style project: ``pom.xml`` plus ``src/main/java``.

    This is the single source of truth for the default project layout.
    """
    root = tmp_path / "shop"
    (root / "src" / "main" / "java").mkdir(parents=True)
    (root / "pom.xml").write_text("<project/>\n")
    return root


@pytest.fixture
def source_root(project_root: Path) -> Path:
    return project_root / "src" / "main" / "java"


@pytest.fixture
def settings(project_root: Path) -> JcreateSettings:
    return make_settings(project_root)


@pytest.fixture
def workspace(settings: JcreateSettings) -> Workspace:
    return Workspace(settings)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI resolves it.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_settings(cwd: Path, **overrides: Any) -> JcreateSettings:
    """Settings rooted at *cwd* with prompts disabled."""
    overrides.setdefault("no_interact", True)
    return JcreateSettings.from_cli(cwd=cwd, **overrides)


def make_packages(source_root: Path, *packages: str) -> None:
    """Create package directories under *source_root*."""
    for package in packages:
        source_root.joinpath(*package.split(".")).mkdir(parents=True, exist_ok=True)


class FakeHost:
    """Scripted Host: answers prompts from queues and records every call.

    A ``None`` answer simulates the user cancelling that prompt.
    """

    def __init__(
        self,
        *,
        choices: Sequence[str | None] = (),
        texts: Sequence[str | None] = (),
    ) -> None:
        self.choices = list(choices)
        self.texts = list(texts)
        self.calls: list[dict[str, Any]] = []
        self.notifications: list[tuple[str, str]] = []
        self.opened: list[Path] = []

    def choose_one(
        self,
        options: Sequence[str],
        labels: Sequence[str] | None = None,
        *,
        prompt: str,
        default: str | None = None,
    ) -> str | None:
        self.calls.append(
            {
                "type": "choose",
                "prompt": prompt,
                "options": list(options),
                "labels": list(labels or options),
                "default": default,
            }
        )
        answer = self.choices.pop(0)
        assert answer is None or answer in options, f"{answer!r} not offered in {options!r}"
        return answer

    def prompt_text(self, prompt: str, *, default: str = "", completer: Any = None) -> str | None:
        self.calls.append(
            {"type": "text", "prompt": prompt, "default": default, "completer": completer}
        )
        return self.texts.pop(0)

    def notify(self, message: str, severity: str = "info") -> None:
        self.notifications.append((message, severity))

    def open_file(self, path: Path) -> None:
        self.opened.append(path)
