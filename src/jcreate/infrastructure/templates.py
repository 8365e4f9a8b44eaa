"""Per-project template overrides loaded from disk.

A project may keep templates in ``.jcreate/templates/<kind>.java``.  Files
found there take precedence over templates from configuration, which in
turn override the code-baked defaults.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from jcreate.domain.kinds import SOURCE_EXTENSION
from jcreate.domain.rendering import template_problem

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(".jcreate") / "templates"


def template_dir(project_root: Path) -> Path:
    return project_root / TEMPLATE_DIR


def load_template_overrides(project_root: Path | None, kinds: Iterable[str]) -> dict[str, str]:
    """Read override files for *kinds* under *project_root*."""
    if project_root is None:
        return {}

    root = template_dir(project_root)
    if not root.is_dir():
        return {}

    overrides: dict[str, str] = {}
    for kind in kinds:
        path = root / f"{kind}{SOURCE_EXTENSION}"
        if not path.is_file():
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Ignoring unreadable template override %s: %s", path, exc)
            continue
        problem = template_problem(text)
        if problem is not None:
            logger.warning("Ignoring template override %s: %s", path, problem)
            continue
        overrides[kind] = text
        logger.debug("Template override for %s from %s", kind, path)
    return overrides


def merge_templates(
    configured: Mapping[str, str], overrides: Mapping[str, str]
) -> dict[str, str]:
    """Overlay *overrides* onto *configured* without mutating either."""
    return {**configured, **overrides}
