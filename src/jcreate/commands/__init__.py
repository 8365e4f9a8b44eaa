"""Subcommand modules for jcreate.

Provides register_commands() which uses deferred imports to keep
``jcreate --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    # --- Groups ---
    from jcreate.commands.create import create
    from jcreate.commands.packages import packages

    cli.add_command(create)
    cli.add_command(packages)

    # --- Standalone commands ---
    from jcreate.commands.info import info
    from jcreate.commands.new import new

    cli.add_command(new)
    cli.add_command(info)
