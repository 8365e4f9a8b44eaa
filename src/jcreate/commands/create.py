"""Command group: create one declaration kind directly.

One subcommand per kind; each prompts only for the name and package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jcreate.commands._base import JcreateGroup
from jcreate.commands._completion import complete_package_option
from jcreate.commands._wizard import run_wizard
from jcreate.domain.kinds import DeclarationKind

if TYPE_CHECKING:
    from jcreate.commands._context import AppContext

_SAMPLE_NAMES: dict[DeclarationKind, str] = {
    DeclarationKind.CLASS: "OrderService",
    DeclarationKind.INTERFACE: "Repository",
    DeclarationKind.ENUM: "Status",
    DeclarationKind.RECORD: "Point",
    DeclarationKind.ABSTRACT_CLASS: "BaseHandler",
}

_CREATE_EXAMPLES = (
    "class OrderService --package com.acme.orders",
    "interface Repository -p com.acme.data",
    "record Point -p com.acme.geometry",
    "abstract-class BaseHandler",
)


@click.group(cls=JcreateGroup, examples=_CREATE_EXAMPLES)
def create() -> None:
    """Create a class, interface, enum, record, or abstract class."""


def _create_kind(
    app: AppContext, kind: DeclarationKind, name: str | None, package: str | None
) -> None:
    if not app.interactive:
        if name is None:
            msg = "NAME is required when prompts are disabled."
            raise click.UsageError(msg)
        if package is None:
            package = app.workspace.default_package()

    result = run_wizard(app.host, app.workspace, kind=kind, name=name, package=package)
    app.finish_create(result)


def _register(kind: DeclarationKind) -> None:
    @create.command(
        kind.command_name,
        help=f"Create a new Java {kind.label.lower()}.",
        examples=(f"{_SAMPLE_NAMES[kind]} -p com.acme", f"{_SAMPLE_NAMES[kind]} --package ''"),
    )
    @click.argument("name", required=False)
    @click.option(
        "-p",
        "--package",
        default=None,
        shell_complete=complete_package_option,
        help='Package name; "" for the unnamed package.',
    )
    @click.pass_obj
    def _command(app: AppContext, name: str | None, package: str | None) -> None:
        _create_kind(app, kind, name, package)


for _kind in DeclarationKind:
    _register(_kind)
