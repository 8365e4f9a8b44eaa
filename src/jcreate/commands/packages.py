"""Command group: package index queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jcreate.commands._base import JcreateGroup
from jcreate.services.packages import PackageService

if TYPE_CHECKING:
    from jcreate.commands._context import AppContext

_PACKAGES_EXAMPLES = (
    "list",
    "default",
    "complete com.acme.ser",
)


@click.group(cls=JcreateGroup, examples=_PACKAGES_EXAMPLES)
def packages() -> None:
    """Inspect packages under the project's source root."""


@packages.command("list", examples=("", "--json"))
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every package, shallowest first."""
    app.emit(PackageService(app.workspace).list_packages())


@packages.command(examples=("",))
@click.pass_obj
def default(app: AppContext) -> None:
    """Show the package new files would default to."""
    app.emit(PackageService(app.workspace).default_package())


@packages.command(examples=("ser", "com.acme.ser"))
@click.argument("text")
@click.pass_obj
def complete(app: AppContext, text: str) -> None:
    """Complete the last segment of a partially typed package TEXT."""
    app.emit(PackageService(app.workspace).complete(text))
