"""CreateService: the single generation entry point.

Pipeline: GATE -> VALIDATE -> GENERATE -> RESOLVE -> PERSIST -> RESPOND

Every failure before PERSIST leaves the filesystem untouched.
"""

from __future__ import annotations

import logging

from jcreate.domain.errors import ErrorCode, TemplateNotFoundError
from jcreate.domain.identifiers import validate_name, validate_package
from jcreate.domain.kinds import parse_kind
from jcreate.domain.rendering import render
from jcreate.infrastructure.filesystem import source_file_path, write_source_file
from jcreate.services.base import BaseService
from jcreate.services.result import ServiceResult

logger = logging.getLogger(__name__)

OP = "create_file"


class CreateService(BaseService):
    """Generates one source file per request."""

    def create_file(self, kind: str, name: str | None, package: str | None) -> ServiceResult:
        """Validate, render, and write a new declaration of *kind*.

        *kind* is a template key; the built-in keys are the values of
        :class:`~jcreate.domain.kinds.DeclarationKind`.
        """
        package = package or ""
        declared = parse_kind(kind)
        template_key = declared.value if declared is not None else kind

        # ── GATE ──────────────────────────────────────────────────
        java_version = self._workspace.settings.options.java_version
        if declared is not None and declared.min_java_version > java_version:
            return ServiceResult.failure(
                OP,
                ErrorCode.VERSION_GATE_FAILED,
                f"{declared.label}s require Java {declared.min_java_version} or higher. "
                f"Current version: {java_version}",
                required=declared.min_java_version,
                configured=java_version,
            )

        # ── VALIDATE ──────────────────────────────────────────────
        name_check = validate_name(name)
        if not name_check.valid:
            assert name_check.error is not None
            return ServiceResult.failure(
                OP, name_check.error, f"Invalid name: {name_check.message}", name=name
            )

        package_check = validate_package(package)
        if not package_check.valid:
            assert package_check.error is not None
            cause = package_check.cause
            return ServiceResult.failure(
                OP,
                package_check.error,
                f"Invalid package: {package_check.message}",
                package=package,
                segment=package_check.segment,
                reason=str(cause.error) if cause is not None else None,
            )
        assert name is not None

        # ── GENERATE ──────────────────────────────────────────────
        try:
            content = render(
                template_key,
                package,
                name,
                templates=self._workspace.templates,
                default_imports=self._workspace.default_imports,
            )
        except TemplateNotFoundError as exc:
            return ServiceResult.failure(OP, ErrorCode.TEMPLATE_NOT_FOUND, str(exc), kind=kind)

        # ── RESOLVE ───────────────────────────────────────────────
        source_root = self._workspace.source_root
        warnings: list[str] = []
        if source_root is None:
            warnings.append(
                f"No source root found; creating relative to {self._workspace.cwd}"
            )
        path = source_file_path(self._workspace.base_dir, package, name)

        # ── PERSIST ───────────────────────────────────────────────
        try:
            write_source_file(path, content)
        except FileExistsError:
            return ServiceResult.failure(
                OP, ErrorCode.ALREADY_EXISTS, f"File already exists: {path}", path=str(path)
            )
        except OSError as exc:
            logger.debug("Write failed for %s", path, exc_info=True)
            return ServiceResult.failure(
                OP,
                ErrorCode.WRITE_FAILED,
                f"Could not create file: {path} ({exc})",
                path=str(path),
                cause=str(exc),
            )

        # ── RESPOND ───────────────────────────────────────────────
        logger.info("Created %s: %s", template_key, path)
        return ServiceResult.success(
            OP,
            {
                "kind": template_key,
                "name": name,
                "package": package,
                "path": str(path),
                "source_root": str(source_root) if source_root is not None else None,
            },
            warnings=warnings,
        )
