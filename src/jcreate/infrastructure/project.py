"""Project root and source root discovery.

The project root is found by walking up from a start directory, similar to
how git finds ``.git/``.  The source root is then located beneath it by
trying layout patterns under a few nested module bases.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

# Markers that only count when they contain a given subdirectory.
COMPOUND_MARKERS: dict[str, str] = {
    "backend": "src",
}

# Module bases searched for source patterns, most specific first.
NESTED_BASES: tuple[str, ...] = ("", "backend", "src", "src/main/java")


def _marker_matches(directory: Path, marker: str) -> bool:
    candidate = directory / marker
    required = COMPOUND_MARKERS.get(marker)
    if required is not None:
        return candidate.is_dir() and (candidate / required).is_dir()
    return candidate.is_file() or candidate.is_dir()


def find_project_root(start: Path | None, markers: Sequence[str]) -> Path | None:
    """Walk up from *start* (default: cwd) to the first directory with a marker.

    Markers are tested in order at each level.  The filesystem root itself
    is never treated as a project root.
    """
    current = (start or Path.cwd()).resolve()
    while current.parent != current:
        for marker in markers:
            if _marker_matches(current, marker):
                logger.debug("Project root %s (marker %s)", current, marker)
                return current
        current = current.parent
    return None


def find_source_root(
    project_root: Path | None,
    patterns: Sequence[str],
    custom_src_path: str | None = None,
) -> Path | None:
    """Locate the directory that maps to the unnamed package.

    A configured *custom_src_path* wins outright when it exists.  Otherwise
    each nested base is tried in turn, and within a base the patterns are
    tried in configured order.
    """
    if project_root is None:
        return None

    if custom_src_path:
        custom = project_root / custom_src_path
        if custom.is_dir():
            return custom

    for nested in NESTED_BASES:
        base = project_root / nested if nested else project_root
        for pattern in patterns:
            candidate = base / pattern
            if candidate.is_dir():
                logger.debug("Source root %s", candidate)
                return candidate
    return None
