"""Package-name text helpers (no filesystem access)."""

from __future__ import annotations

import re
from pathlib import PurePath

_PACKAGE_DECL_RE = re.compile(r"package\s+([^;]+);")


def extract_package(source: str) -> str | None:
    """Return the first ``package x.y;`` declaration in *source*, if any."""
    match = _PACKAGE_DECL_RE.search(source)
    if match is None:
        return None
    return match.group(1).strip()


def package_fragment(text: str | None) -> str:
    """Last dot-delimited segment of a partially typed package.

    ``"com.exa"`` -> ``"exa"``; ``"com."`` -> ``""``.
    """
    if not text:
        return ""
    return text.rsplit(".", 1)[-1]


def package_to_parts(package: str) -> list[str]:
    if not package:
        return []
    return package.split(".")


def relative_to_package(relative: PurePath) -> str:
    """Convert a source-root-relative directory to a dotted package name."""
    return ".".join(part for part in relative.parts if part not in ("", "."))
