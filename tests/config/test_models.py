"""Tests for configuration models and their code-baked defaults."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jcreate.config.models import (
    DEFAULT_PROJECT_MARKERS,
    DEFAULT_SRC_PATTERNS,
    JcreateConfig,
    OptionsConfig,
)
from jcreate.domain.kinds import DEFAULT_TEMPLATES


class TestOptionsConfig:
    def test_defaults(self) -> None:
        opts = OptionsConfig()
        assert opts.auto_open is True
        assert opts.use_notify is True
        assert opts.java_version == 17
        assert opts.src_patterns == ["src/main/java", "src/test/java", "src"]
        assert opts.custom_src_path is None
        assert "pom.xml" in opts.project_markers
        assert "backend" in opts.project_markers

    def test_default_lists_are_copies(self) -> None:
        opts = OptionsConfig()
        assert opts.src_patterns is not DEFAULT_SRC_PATTERNS
        assert opts.project_markers is not DEFAULT_PROJECT_MARKERS

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            OptionsConfig().java_version = 8  # type: ignore[misc]


class TestJcreateConfig:
    def test_defaults(self) -> None:
        config = JcreateConfig()
        assert config.templates == dict(DEFAULT_TEMPLATES)
        assert config.default_imports["record"] == ["java.util.*"]
        assert config.default_imports["class"] == []

    def test_template_override_keeps_other_kinds(self) -> None:
        config = JcreateConfig.model_validate(
            {"templates": {"class": "package %s;\n\nfinal class %s {}"}}
        )
        assert config.templates["class"] == "package %s;\n\nfinal class %s {}"
        assert config.templates["enum"] == DEFAULT_TEMPLATES["enum"]

    def test_new_kind_added(self) -> None:
        config = JcreateConfig.model_validate({"templates": {"annotation": "%s @interface %s"}})
        assert "annotation" in config.templates
        assert "class" in config.templates

    def test_import_override_keeps_other_kinds(self) -> None:
        config = JcreateConfig.model_validate({"default_imports": {"class": ["java.io.*"]}})
        assert config.default_imports["class"] == ["java.io.*"]
        assert config.default_imports["record"] == ["java.util.*"]

    def test_record_imports_can_be_cleared(self) -> None:
        config = JcreateConfig.model_validate({"default_imports": {"record": []}})
        assert config.default_imports["record"] == []

    def test_bad_template_rejected(self) -> None:
        with pytest.raises(ValidationError, match="templates.class"):
            JcreateConfig.model_validate({"templates": {"class": "class %s {}"}})

    def test_sparse_options(self) -> None:
        config = JcreateConfig.model_validate({"options": {"java_version": 11}})
        assert config.options.java_version == 11
        assert config.options.auto_open is True
