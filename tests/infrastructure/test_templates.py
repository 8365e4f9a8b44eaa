"""Tests for per-project template override files."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from jcreate.domain.kinds import DEFAULT_TEMPLATES
from jcreate.infrastructure.templates import (
    load_template_overrides,
    merge_templates,
    template_dir,
)


def _write_override(project_root: Path, kind: str, text: str) -> Path:
    root = template_dir(project_root)
    root.mkdir(parents=True, exist_ok=True)
    path = root / f"{kind}.java"
    path.write_text(text)
    return path


class TestLoadTemplateOverrides:
    def test_reads_known_kinds(self, project_root: Path) -> None:
        _write_override(project_root, "class", "package %s;\n\nfinal class %s {}")
        overrides = load_template_overrides(project_root, DEFAULT_TEMPLATES)
        assert overrides == {"class": "package %s;\n\nfinal class %s {}"}

    def test_ignores_unknown_files(self, project_root: Path) -> None:
        _write_override(project_root, "widget", "package %s;\n\nclass %s {}")
        assert load_template_overrides(project_root, ["class"]) == {}

    def test_no_template_dir(self, project_root: Path) -> None:
        assert load_template_overrides(project_root, ["class"]) == {}

    def test_no_project(self) -> None:
        assert load_template_overrides(None, ["class"]) == {}

    def test_invalid_override_skipped_with_warning(
        self, project_root: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        _write_override(project_root, "enum", "enum %s {}")
        with caplog.at_level(logging.WARNING, logger="jcreate"):
            overrides = load_template_overrides(project_root, ["enum"])
        assert overrides == {}
        assert "Ignoring template override" in caplog.text

    def test_undecodable_override_skipped(
        self, project_root: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = _write_override(project_root, "class", "")
        path.write_bytes(b"package %s;\n\n\xff\xfe class %s {}")
        _write_override(project_root, "enum", "package %s;\n\nenum %s {}")
        with caplog.at_level(logging.WARNING, logger="jcreate"):
            overrides = load_template_overrides(project_root, ["class", "enum"])
        assert overrides == {"enum": "package %s;\n\nenum %s {}"}
        assert "Ignoring unreadable template override" in caplog.text


class TestMergeTemplates:
    def test_overrides_win(self) -> None:
        merged = merge_templates({"class": "a", "enum": "b"}, {"class": "c"})
        assert merged == {"class": "c", "enum": "b"}

    def test_inputs_untouched(self) -> None:
        configured = {"class": "a"}
        merge_templates(configured, {"class": "b"})
        assert configured == {"class": "a"}
