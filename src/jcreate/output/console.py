"""Rich consoles and the ``jc.*`` theme.

Results are drawn on an in-memory console and returned as a string, which
keeps ``format_result() -> str`` free of I/O.  Prompts and notifications
draw straight to stderr so stdout carries only results.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

JCREATE_THEME = Theme(
    {
        "jc.ok": "bold green",
        "jc.error": "bold red",
        "jc.warning": "bold yellow",
        "jc.info": "cyan",
        "jc.op": "bold cyan",
        "jc.key": "dim",
        "jc.path": "dim",
        "jc.package": "bold blue",
        "jc.kind": "magenta",
        "jc.choice": "bold",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int = DEFAULT_WIDTH) -> Console:
    """In-memory console; read what was printed with :func:`get_output`."""
    return Console(
        file=StringIO(),
        theme=JCREATE_THEME,
        no_color=no_color,
        highlight=False,
        width=width,
    )


def create_stderr_console() -> Console:
    return Console(stderr=True, theme=JCREATE_THEME, highlight=False)


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console does not write to a buffer"
        raise TypeError(msg)
    return buffer.getvalue()


def style_for_severity(severity: str) -> str:
    """Theme style for a host notification (``info``/``warning``/``error``)."""
    return f"jc.{severity}" if severity in ("info", "warning", "error") else ""
