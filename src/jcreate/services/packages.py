"""PackageService: queries over the package index of the source root."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from jcreate.domain.packages import package_fragment
from jcreate.services.base import BaseService
from jcreate.services.result import ServiceResult

if TYPE_CHECKING:
    from jcreate.infrastructure.workspace import Workspace


def complete_packages(workspace: Workspace, incomplete: str) -> list[str]:
    """Completion candidates for a partially typed package.

    Only the last dot-delimited segment is matched, at any depth.
    """
    fragment = package_fragment(incomplete)
    if not fragment:
        return []
    return workspace.matching_packages(fragment)


def _path_or_none(path: Path | None) -> str | None:
    return str(path) if path is not None else None


class PackageService(BaseService):
    """List, complete, and guess packages."""

    def list_packages(self) -> ServiceResult:
        root = self._workspace.source_root
        packages = self._workspace.packages()
        return ServiceResult.success(
            "list_packages",
            {"source_root": _path_or_none(root), "packages": packages, "count": len(packages)},
            warnings=[] if root is not None else ["No source root found"],
        )

    def default_package(self) -> ServiceResult:
        return ServiceResult.success(
            "default_package", {"package": self._workspace.default_package()}
        )

    def complete(self, incomplete: str) -> ServiceResult:
        return ServiceResult.success(
            "complete_packages",
            {
                "fragment": package_fragment(incomplete),
                "matches": complete_packages(self._workspace, incomplete),
            },
        )

    def describe(self) -> ServiceResult:
        """Summarize how the workspace resolved for the current directory."""
        ws = self._workspace
        return ServiceResult.success(
            "info",
            {
                "cwd": str(ws.cwd),
                "project_root": _path_or_none(ws.project_root),
                "source_root": _path_or_none(ws.source_root),
                "config_path": _path_or_none(ws.settings.config_path),
                "java_version": ws.settings.options.java_version,
                "default_package": ws.default_package(),
            },
        )
