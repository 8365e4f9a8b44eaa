"""Per-invocation state handed to commands through ``@click.pass_obj``."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from jcreate.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from jcreate.commands._host import Host
    from jcreate.config.settings import JcreateSettings
    from jcreate.infrastructure.workspace import Workspace
    from jcreate.services.result import ServiceResult


class AppContext:
    """Settings, workspace, and host for a single jcreate request.

    Building it configures logging. The workspace and the host are made on
    first use, so ``--help`` and ``--examples`` stay off the filesystem.
    """

    def __init__(self, settings: JcreateSettings, *, host: Host | None = None) -> None:
        from jcreate.config.logging import configure_logging

        self.settings = settings
        self._host = host
        self._workspace: Workspace | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        if self._workspace is None:
            from jcreate.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
        return self._workspace

    @property
    def host(self) -> Host:
        if self._host is None:
            from jcreate.commands._host import ClickHost

            self._host = ClickHost(notifications=self.settings.options.use_notify)
        return self._host

    @property
    def interactive(self) -> bool:
        """Whether prompts may be shown.

        ``--no-interact`` and ``--json`` turn prompts off, and so does
        stdin that is not a terminal.
        """
        if self.settings.no_interact or self.settings.json_output:
            return False
        return sys.stdin.isatty()

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        A success goes to stdout and its warnings to stderr, except in JSON
        mode where the warnings are already part of the document. A failure
        goes to stderr and ends the process with status 1.
        """
        text = format_result(result, settings=self._output_settings())
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if self.settings.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

    def finish_create(self, result: ServiceResult | None) -> None:
        """Report the outcome of a creation request.

        ``None`` means the user cancelled a prompt: an informational
        notice, exit code 0.  A created file is opened in the editor when
        ``auto_open`` is set and the session is interactive.
        """
        if result is None:
            from jcreate.commands._wizard import CANCELLED_MESSAGE

            self.host.notify(CANCELLED_MESSAGE, "info")
            return

        self.emit(result)
        if self.settings.options.auto_open and self.interactive:
            self.host.open_file(Path(result.data["path"]))
