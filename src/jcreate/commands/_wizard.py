"""Sequential creation wizard: kind -> name -> package -> create.

Each step asks the host only for what the caller did not already supply and
returns early when the user cancels.  A cancelled run returns None; any
other outcome is the ServiceResult of the request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jcreate.domain.errors import ErrorCode
from jcreate.domain.kinds import DeclarationKind, kind_label
from jcreate.services.create import OP as CREATE_OP
from jcreate.services.create import CreateService
from jcreate.services.result import ServiceResult

if TYPE_CHECKING:
    from jcreate.commands._host import Host
    from jcreate.infrastructure.workspace import Workspace

NEW_PACKAGE = "(new package)"
CANCELLED_MESSAGE = "Java file creation canceled."


def choose_kind(host: Host, *, java_version: int) -> DeclarationKind | None:
    kinds = list(DeclarationKind)
    choice = host.choose_one(
        [k.value for k in kinds],
        [kind_label(k, java_version=java_version) for k in kinds],
        prompt="Select Java type:",
    )
    return DeclarationKind(choice) if choice is not None else None


def ask_name(host: Host, kind: DeclarationKind) -> str | None:
    return host.prompt_text(f"Name for {kind.label.lower()}")


def choose_package(host: Host, workspace: Workspace, default: str) -> str | None:
    """Pick an existing package or type a new one.

    With no packages on disk this is a single free-text prompt.  Otherwise
    the user picks from the index; picking ``(new package)`` asks for a base
    package and then prefills the text prompt with it.
    """
    packages = workspace.packages()

    def _complete(lead: str) -> list[str]:
        return [p for p in packages if p.startswith(lead)]

    if not packages:
        return host.prompt_text("Package", default=default, completer=_complete)

    choice = host.choose_one(
        [NEW_PACKAGE, *packages],
        [f"+ {NEW_PACKAGE}", *packages],
        prompt="Package:",
        default=default if default in packages else None,
    )
    if choice is None:
        return None
    if choice != NEW_PACKAGE:
        return choice

    base = host.choose_one(packages, prompt="Select base package:", default=default or None)
    if base is None:
        return None
    return host.prompt_text("New package", default=base, completer=_complete)


def run_wizard(
    host: Host,
    workspace: Workspace,
    *,
    kind: DeclarationKind | None = None,
    name: str | None = None,
    package: str | None = None,
) -> ServiceResult | None:
    """Prompt for whatever is missing, then create the file."""
    if kind is None:
        kind = choose_kind(host, java_version=workspace.settings.options.java_version)
        if kind is None:
            return None

    if name is None:
        name = ask_name(host, kind)
        if name is None:
            return None
    if not name:
        return ServiceResult.failure(CREATE_OP, ErrorCode.EMPTY_NAME, "Name is required.")

    if package is None:
        package = choose_package(host, workspace, workspace.default_package())
        if package is None:
            return None

    return CreateService(workspace).create_file(kind, name, package)
