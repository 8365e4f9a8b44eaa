"""Host collaborator: the UI capabilities the creation flow depends on.

The wizard only needs four things from its surroundings: pick one of N
options, read a line of text, show a message, and open a file.  ``Host``
names that contract; ``ClickHost`` is the terminal implementation.
Prompt cancellation (Ctrl-C, EOF) is reported as ``None``, never raised.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Literal, Protocol

import click
from rich.console import Console
from rich.text import Text

from jcreate.output.console import create_stderr_console, style_for_severity

Severity = Literal["info", "warning", "error"]
Completer = Callable[[str], list[str]]

# Typing this suffix at a text prompt lists completions for what precedes it.
COMPLETION_SUFFIX = "?"


class Host(Protocol):
    def choose_one(
        self,
        options: Sequence[str],
        labels: Sequence[str] | None = None,
        *,
        prompt: str,
        default: str | None = None,
    ) -> str | None: ...

    def prompt_text(
        self,
        prompt: str,
        *,
        default: str = "",
        completer: Completer | None = None,
    ) -> str | None: ...

    def notify(self, message: str, severity: Severity = "info") -> None: ...

    def open_file(self, path: Path) -> None: ...


class ClickHost:
    """Terminal host built on ``click.prompt`` and a Rich stderr console.

    When *notifications* is False, info and warning messages are dropped;
    errors are always shown.
    """

    def __init__(self, *, notifications: bool = True, console: Console | None = None) -> None:
        self.notifications = notifications
        self.console = console or create_stderr_console()

    def choose_one(
        self,
        options: Sequence[str],
        labels: Sequence[str] | None = None,
        *,
        prompt: str,
        default: str | None = None,
    ) -> str | None:
        if not options:
            return None
        labels = labels or options

        self.console.print(Text(prompt, style="jc.op"))
        for index, label in enumerate(labels, start=1):
            number = Text(f"  {index:>2}) ", style="jc.key")
            self.console.print(Text.assemble(number, Text(label, style="jc.choice")))

        default_index = options.index(default) + 1 if default in options else 1
        try:
            choice = click.prompt(
                "Choice",
                type=click.IntRange(1, len(options)),
                default=default_index,
                err=True,
            )
        except click.Abort:
            return None
        return options[choice - 1]

    def prompt_text(
        self,
        prompt: str,
        *,
        default: str = "",
        completer: Completer | None = None,
    ) -> str | None:
        current = default
        while True:
            try:
                value = click.prompt(
                    prompt, default=current, show_default=bool(current), err=True
                )
            except click.Abort:
                return None

            value = value.strip()
            if completer is None or not value.endswith(COMPLETION_SUFFIX):
                return value

            lead = value[: -len(COMPLETION_SUFFIX)]
            candidates = completer(lead)
            if not candidates:
                self.console.print(Text("  (no matches)", style="dim"))
            for candidate in candidates:
                self.console.print(Text(f"    {candidate}", style="jc.package"))
            current = candidates[0] if len(candidates) == 1 else lead

    def notify(self, message: str, severity: Severity = "info") -> None:
        if not self.notifications and severity != "error":
            return
        self.console.print(Text(message, style=style_for_severity(severity)))

    def open_file(self, path: Path) -> None:
        click.edit(filename=str(path))
