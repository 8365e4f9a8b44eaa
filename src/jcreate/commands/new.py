"""Command: full creation wizard (kind, name, package)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jcreate.commands._base import JcreateCommand
from jcreate.commands._completion import complete_package_option
from jcreate.commands._wizard import run_wizard
from jcreate.domain.kinds import DeclarationKind, parse_kind

if TYPE_CHECKING:
    from jcreate.commands._context import AppContext

_NEW_EXAMPLES = (
    "",
    "--kind class --name OrderService --package com.acme.orders",
    "-k record -n Point -p com.acme.geometry",
    '--no-interact -k interface -n Repository --package ""',
)


@click.command("new", cls=JcreateCommand, examples=_NEW_EXAMPLES)
@click.option(
    "-k",
    "--kind",
    type=click.Choice([k.command_name for k in DeclarationKind]),
    default=None,
    help="Declaration kind (prompted when omitted).",
)
@click.option("-n", "--name", default=None, help="Type name (prompted when omitted).")
@click.option(
    "-p",
    "--package",
    default=None,
    shell_complete=complete_package_option,
    help='Package name; "" for the unnamed package (prompted when omitted).',
)
@click.pass_obj
def new(app: AppContext, kind: str | None, name: str | None, package: str | None) -> None:
    """Create a Java file, prompting for kind, name, and package."""
    if not app.interactive:
        if kind is None or name is None:
            msg = "--kind and --name are required when prompts are disabled."
            raise click.UsageError(msg)
        if package is None:
            package = app.workspace.default_package()

    result = run_wizard(
        app.host,
        app.workspace,
        kind=parse_kind(kind) if kind else None,
        name=name,
        package=package,
    )
    app.finish_create(result)
