"""Command: show how the current directory resolves."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jcreate.commands._base import JcreateCommand
from jcreate.services.packages import PackageService

if TYPE_CHECKING:
    from jcreate.commands._context import AppContext


@click.command("info", cls=JcreateCommand, examples=("", "--json"))
@click.pass_obj
def info(app: AppContext) -> None:
    """Show the project root, source root, and config in effect."""
    app.emit(PackageService(app.workspace).describe())
