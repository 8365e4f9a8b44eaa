"""Filesystem operations for the source tree.

INVARIANT: Files are never overwritten.  ``write_source_file`` refuses any
destination that already exists, and the caller validates everything before
the first directory is created.

Pure package-name helpers live in :mod:`jcreate.domain.packages`.  This
module handles directory scanning, path resolution, and file I/O.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path, PurePath

from jcreate.domain.kinds import SOURCE_EXTENSION
from jcreate.domain.packages import extract_package, package_to_parts, relative_to_package

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def source_file_path(base_dir: Path, package: str, name: str) -> Path:
    """Resolve ``{base_dir}/{package as dirs}/{name}.java``.

    An empty *package* places the file directly in *base_dir*.
    """
    return base_dir.joinpath(*package_to_parts(package), f"{name}{SOURCE_EXTENSION}")


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def write_source_file(path: Path, content: str) -> None:
    """Create *path* with *content*, creating parent directories as needed.

    Raises:
        FileExistsError: something already sits at *path*; nothing is written.
        NotADirectoryError: a file blocks one of the parent directories.
        OSError: the directories or the file could not be written.
    """
    if path.exists():
        raise FileExistsError(str(path))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except FileExistsError as exc:
        # A file occupies one of the package directories.
        raise NotADirectoryError(exc.errno, exc.strerror, exc.filename) from exc
    path.write_text(content, encoding="utf-8")


def read_declared_package(path: Path) -> str | None:
    """Return the package declared in a Java file, or None if unreadable."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.debug("Skipping unreadable source file %s", path, exc_info=True)
        return None
    return extract_package(content)


# ---------------------------------------------------------------------------
# Package discovery
# ---------------------------------------------------------------------------


def iter_package_dirs(source_root: Path) -> Iterator[PurePath]:
    """Yield every subdirectory of *source_root* as a relative path.

    Walks top-down with siblings in name order and skips hidden directories.
    """
    for dirpath, dirnames, _filenames in os.walk(source_root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        current = Path(dirpath)
        for dirname in dirnames:
            yield (current / dirname).relative_to(source_root)


def list_packages(source_root: Path | None) -> list[str]:
    """All packages under *source_root*, shallowest (shortest name) first."""
    if source_root is None or not source_root.is_dir():
        return []
    packages = [relative_to_package(rel) for rel in iter_package_dirs(source_root)]
    # sorted() is stable, so equal lengths keep discovery order.
    return sorted(packages, key=len)


def match_packages(source_root: Path | None, fragment: str) -> list[str]:
    """Packages at any depth whose trailing segment(s) start with *fragment*.

    A dotted fragment such as ``"service.im"`` must match consecutive
    directories, the last one by prefix: ``com.acme.service.impl`` matches,
    ``com.service.acme.impl`` does not.
    """
    if source_root is None or not fragment or not source_root.is_dir():
        return []

    wanted = fragment.split(".")
    head, last = wanted[:-1], wanted[-1]
    matches: list[str] = []
    for rel in iter_package_dirs(source_root):
        parts = rel.parts
        if len(parts) < len(wanted):
            continue
        tail = parts[len(parts) - len(wanted) :]
        if list(tail[:-1]) == head and tail[-1].startswith(last):
            matches.append(relative_to_package(rel))
    return sorted(matches)


def default_package(source_root: Path | None, cwd: Path) -> str:
    """Guess the package the user is most likely working in.

    Inside the source root, the cwd itself names the package.  Elsewhere the
    first sibling ``.java`` file with a package declaration decides.
    """
    cwd = cwd.resolve()
    if source_root is not None:
        root = source_root.resolve()
        if cwd.is_relative_to(root):
            return relative_to_package(cwd.relative_to(root))

    for candidate in sorted(cwd.glob(f"*{SOURCE_EXTENSION}")):
        if not candidate.is_file():
            continue
        package = read_declared_package(candidate)
        if package:
            return package
    return ""
