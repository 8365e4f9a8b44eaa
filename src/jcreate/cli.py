"""The ``jcreate`` entry point: global flags, then the command tree."""

from __future__ import annotations

from typing import Any

import click

from jcreate import __version__
from jcreate.commands import register_commands
from jcreate.commands._base import JcreateGroup
from jcreate.commands._context import AppContext
from jcreate.config.settings import JcreateSettings

# Flags every subcommand inherits; each lands on JcreateSettings by name.
_GLOBAL_FLAGS = (
    click.option("--json", "json_output", is_flag=True, help="Print results as JSON."),
    click.option("-q", "--quiet", is_flag=True, help="Print only the essential value."),
    click.option("-v", "--verbose", is_flag=True, help="Show extra fields and debug logs."),
    click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines."),
    click.option("--no-interact", is_flag=True, help="Never prompt; fail on missing input."),
    click.option(
        "-c", "--config", "config_path", metavar="PATH", help="Use this jcreate.toml."
    ),
)


def _global_flags(func: Any) -> Any:
    for option in reversed(_GLOBAL_FLAGS):
        func = option(func)
    return func


@click.group(
    cls=JcreateGroup,
    invoke_without_command=True,
    examples=(
        "new",
        "create class OrderService -p com.acme.orders",
        "packages list",
        "-q packages list",
        "info",
    ),
)
@click.version_option(__version__, prog_name="jcreate")
@_global_flags
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """jcreate: scaffold Java classes, interfaces, enums, and records."""
    ctx.obj = AppContext(JcreateSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
