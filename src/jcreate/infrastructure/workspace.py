"""Workspace: the per-request view of the project on disk.

A Workspace is the single dependency injected into every service.  It pairs
the frozen settings with the directory the request starts from and memoizes
the project root and source root for the lifetime of one request only, so
each invocation sees the filesystem as it is now.
"""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING

from jcreate.infrastructure.filesystem import default_package, list_packages, match_packages
from jcreate.infrastructure.project import find_project_root, find_source_root
from jcreate.infrastructure.templates import load_template_overrides, merge_templates

if TYPE_CHECKING:
    from jcreate.config.settings import JcreateSettings

logger = logging.getLogger(__name__)


class Workspace:
    """Project context for a single generation or query request."""

    def __init__(self, settings: JcreateSettings, *, cwd: Path | None = None) -> None:
        self.settings = settings
        self.cwd = (cwd or settings.cwd).resolve()

    @cached_property
    def project_root(self) -> Path | None:
        return find_project_root(self.cwd, self.settings.options.project_markers)

    @cached_property
    def source_root(self) -> Path | None:
        """Directory of the unnamed package, or None outside a project."""
        opts = self.settings.options
        return find_source_root(self.project_root, opts.src_patterns, opts.custom_src_path)

    @property
    def base_dir(self) -> Path:
        """Where new files go: the source root, else the cwd."""
        return self.source_root or self.cwd

    @cached_property
    def templates(self) -> dict[str, str]:
        """Configured templates with per-project override files applied."""
        overrides = load_template_overrides(self.project_root, self.settings.templates)
        return merge_templates(self.settings.templates, overrides)

    @property
    def default_imports(self) -> dict[str, list[str]]:
        return self.settings.default_imports

    # --- package index ---

    def packages(self) -> list[str]:
        return list_packages(self.source_root)

    def matching_packages(self, fragment: str) -> list[str]:
        return match_packages(self.source_root, fragment)

    def default_package(self) -> str:
        return default_package(self.source_root, self.cwd)
