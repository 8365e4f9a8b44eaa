"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, jcreate.toml only contains
overrides.  ``templates`` and ``default_imports`` are merged per kind, so
overriding one kind keeps the built-in entries for the others.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from jcreate.domain.kinds import DEFAULT_IMPORTS, DEFAULT_TEMPLATES
from jcreate.domain.rendering import template_problem

DEFAULT_SRC_PATTERNS = ["src/main/java", "src/test/java", "src"]

DEFAULT_PROJECT_MARKERS = [
    "pom.xml",
    "build.gradle",
    "build.gradle.kts",
    "settings.gradle",
    "settings.gradle.kts",
    ".project",
    "backend",
]


# --- merge helpers shared with JcreateSettings ---


def merge_template_defaults(value: Any) -> Any:
    if value is None:
        return dict(DEFAULT_TEMPLATES)
    if isinstance(value, Mapping):
        return {**DEFAULT_TEMPLATES, **value}
    return value


def merge_import_defaults(value: Any) -> Any:
    defaults = {kind: list(imports) for kind, imports in DEFAULT_IMPORTS.items()}
    if value is None:
        return defaults
    if isinstance(value, Mapping):
        return {**defaults, **value}
    return value


def check_templates(templates: dict[str, str]) -> dict[str, str]:
    for kind, template in templates.items():
        problem = template_problem(template)
        if problem is not None:
            msg = f"templates.{kind}: {problem}"
            raise ValueError(msg)
    return templates


# --- jcreate.toml sections ---


class OptionsConfig(BaseModel):
    """[options] section."""

    model_config = {"frozen": True}

    auto_open: bool = True
    use_notify: bool = True
    java_version: int = 17
    src_patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_SRC_PATTERNS))
    project_markers: list[str] = Field(default_factory=lambda: list(DEFAULT_PROJECT_MARKERS))
    custom_src_path: str | None = None


class JcreateConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    templates: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_TEMPLATES))
    default_imports: dict[str, list[str]] = Field(
        default_factory=lambda: merge_import_defaults(None)
    )
    options: OptionsConfig = Field(default_factory=OptionsConfig)

    @field_validator("templates", mode="before")
    @classmethod
    def _merge_templates(cls, value: Any) -> Any:
        return merge_template_defaults(value)

    @field_validator("templates")
    @classmethod
    def _check_templates(cls, value: dict[str, str]) -> dict[str, str]:
        return check_templates(value)

    @field_validator("default_imports", mode="before")
    @classmethod
    def _merge_imports(cls, value: Any) -> Any:
        return merge_import_defaults(value)
