"""Human-readable rendering of ServiceResult with Rich.

Each op has a renderer keyed by ``result.op``; anything else is shown as a
flat key/value list.  Output is drawn on a buffered console and returned as
text, so Rich leaves out color codes whenever stdout is not a terminal.
Lines are soft-wrapped so long paths stay on one line.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from rich.text import Text

from jcreate.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from jcreate.services.result import ServiceResult

    Renderer = Callable[[ServiceResult, Console, bool], None]

UNSET = "(none)"
UNNAMED_PACKAGE = "(default package)"


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a person at a terminal."""
    console = create_console()
    if result.ok:
        _RENDERERS.get(result.op, _render_key_values)(result, console, verbose)
    else:
        _render_error(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """The bare value a script wants from each op, one item per line."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"
    pick = _QUIET_VALUES.get(result.op)
    if pick is None:
        return f"OK: {result.op}"
    return pick(result.data)


_QUIET_VALUES: dict[str, Callable[[dict[str, Any]], str]] = {
    "create_file": lambda data: str(data.get("path", "")),
    "list_packages": lambda data: "\n".join(data.get("packages", [])),
    "complete_packages": lambda data: "\n".join(data.get("matches", [])),
    "default_package": lambda data: str(data.get("package", "")),
}


# --- building blocks ---


def _value_style(key: str) -> str | None:
    if key.endswith(("path", "root")):
        return "jc.path"
    if key == "package":
        return "jc.package"
    if key == "kind":
        return "jc.kind"
    return None


def _display(key: str, value: Any) -> str:
    if value is None:
        return UNSET
    if key == "package" and value == "":
        return UNNAMED_PACKAGE
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _heading(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "jc.ok"), "  ", (result.op, "jc.op")), soft_wrap=True)


def _line(console: Console, key: str, value: Any) -> None:
    console.print(
        Text.assemble((f"  {key}: ", "jc.key"), (_display(key, value), _value_style(key))),
        soft_wrap=True,
    )


def _listing(
    console: Console, title: str, items: Sequence[str], *, empty: str | None = None
) -> None:
    if not items:
        if empty:
            console.print(Text(f"  {empty}", style="dim"))
        return
    console.print(Text(f"  {title}:", style="jc.key"))
    for item in items:
        console.print(Text(f"    {item}", style="jc.package"), soft_wrap=True)


# --- renderers ---


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    err = result.error
    message = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "jc.error"), "  ", (result.op, "jc.op"), " — ", message),
        soft_wrap=True,
    )
    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for key, value in err.detail.items():
            console.print(Text(f"    {key}: {value}", style="dim"), soft_wrap=True)


def _render_created(result: ServiceResult, console: Console, verbose: bool) -> None:
    _heading(console, result)
    keys = ["path", "kind", "name", "package"]
    if verbose:
        keys.append("source_root")
    for key in keys:
        if key in result.data:
            _line(console, key, result.data[key])


def _render_package_list(result: ServiceResult, console: Console, verbose: bool) -> None:
    _heading(console, result)
    _line(console, "source_root", result.data.get("source_root"))
    _line(console, "count", result.data.get("count", 0))
    _listing(console, "packages", result.data.get("packages", []))


def _render_completions(result: ServiceResult, console: Console, verbose: bool) -> None:
    _heading(console, result)
    _line(console, "fragment", result.data.get("fragment", ""))
    _listing(console, "matches", result.data.get("matches", []), empty="(no matches)")


def _render_key_values(result: ServiceResult, console: Console, verbose: bool) -> None:
    _heading(console, result)
    for key, value in result.data.items():
        _line(console, key, value)


_RENDERERS: dict[str, Renderer] = {
    "create_file": _render_created,
    "list_packages": _render_package_list,
    "complete_packages": _render_completions,
}
