"""Pure file-content rendering for new declarations.

Templates are complete Java sources with two ``%s`` slots (package, type
name), so a template stays readable on its own.  After substitution the
generated ``package ...;`` header is cut out and replaced with a normalized
header: the package line followed by the import block.

A custom template whose text does not start with the standard header keeps
its own header verbatim and receives no imports.  This is how users supply
license banners or other non-standard preambles.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from jcreate.domain.errors import TemplateNotFoundError


def package_line(package: str) -> str:
    if not package:
        return ""
    return f"package {package};\n\n"


def import_block(imports: Sequence[str]) -> str:
    """One ``import`` line per entry, then a blank line if any were emitted."""
    if not imports:
        return ""
    lines = "".join(f"import {item};\n" for item in imports)
    return lines + "\n"


def fill_template(template: str, package: str, name: str) -> str:
    """Substitute the two positional slots."""
    return template % (package, name)


def render(
    kind: str,
    package: str,
    name: str,
    *,
    templates: Mapping[str, str],
    default_imports: Mapping[str, Sequence[str]],
) -> str:
    """Render the full text of a new source file.

    Raises:
        TemplateNotFoundError: no template is configured for *kind*.
    """
    template = templates.get(kind)
    if template is None:
        raise TemplateNotFoundError(kind)

    package = package or ""
    header = package_line(package) + import_block(default_imports.get(kind) or ())

    body = fill_template(template, package, name)
    generated = f"package {package};\n\n"
    if body.startswith(generated):
        body = header + body[len(generated) :]
    return body


def template_problem(template: str) -> str | None:
    """Describe why *template* cannot be filled, or None when it can."""
    try:
        fill_template(template, "pkg", "Name")
    except (TypeError, ValueError) as exc:
        return f"template must contain exactly two %s slots ({exc})"
    return None
