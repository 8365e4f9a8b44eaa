"""Where jcreate.toml comes from.

Lookup order: the ``JCREATE_CONFIG`` env var, then the nearest jcreate.toml
at or above the start directory, then the per-user file.  The ``--config``
flag bypasses all of this in :meth:`JcreateSettings.from_cli`.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path

import click

from jcreate.config.models import JcreateConfig

APP_NAME = "jcreate"
CONFIG_FILENAME = "jcreate.toml"
CONFIG_ENV_VAR = "JCREATE_CONFIG"


def user_config_path() -> Path:
    """Per-user config file (``~/.config/jcreate/jcreate.toml`` on Linux)."""
    return Path(click.get_app_dir(APP_NAME)) / CONFIG_FILENAME


def _search_dirs(start: Path | None) -> Iterator[Path]:
    here = (start or Path.cwd()).resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start*, if any.

    A ``JCREATE_CONFIG`` pointing at a missing file means no config at all;
    it does not fall through to the other locations.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    for directory in _search_dirs(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    user_path = user_config_path()
    return user_path if user_path.is_file() else None


def load_config(path: Path | None = None, cwd: Path | None = None) -> JcreateConfig:
    """Parse and validate *path*, or the file discovered from *cwd*.

    With no file anywhere, the code defaults apply.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return JcreateConfig()
    with path.open("rb") as fh:
        return JcreateConfig.model_validate(tomllib.load(fh))
