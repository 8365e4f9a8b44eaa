"""Shell completion callbacks."""

from __future__ import annotations

import click
from click.shell_completion import CompletionItem

from jcreate.commands._context import AppContext


def complete_package_option(
    ctx: click.Context, _param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Complete ``--package`` from directories under the source root.

    During shell completion the root group callback does not run, so the
    settings are built here when no AppContext exists yet.
    """
    from jcreate.infrastructure.workspace import Workspace
    from jcreate.services.packages import complete_packages

    app = ctx.find_object(AppContext)
    try:
        if app is not None:
            workspace = app.workspace
        else:
            from jcreate.config.settings import JcreateSettings

            workspace = Workspace(JcreateSettings.from_cli())
    except click.ClickException:
        return []
    return [CompletionItem(name) for name in complete_packages(workspace, incomplete)]
