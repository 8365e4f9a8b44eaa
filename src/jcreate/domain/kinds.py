"""Declaration kinds and their code-baked defaults.

Each kind owns exactly one built-in template and one default-import list.
Templates carry two ``%s`` slots: the package name, then the type name.
User configuration is merged over these defaults, never into them.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

SOURCE_EXTENSION = ".java"


class DeclarationKind(StrEnum):
    """Kinds of top-level declarations jcreate can scaffold."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    ABSTRACT_CLASS = "abstract_class"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def min_java_version(self) -> int:
        """Lowest Java language level that supports this kind."""
        return _MIN_JAVA_VERSION.get(self, 1)

    @property
    def command_name(self) -> str:
        """CLI spelling (``abstract_class`` -> ``abstract-class``)."""
        return self.value.replace("_", "-")


_LABELS: dict[DeclarationKind, str] = {
    DeclarationKind.CLASS: "Class",
    DeclarationKind.INTERFACE: "Interface",
    DeclarationKind.ENUM: "Enum",
    DeclarationKind.RECORD: "Record",
    DeclarationKind.ABSTRACT_CLASS: "Abstract Class",
}

_MIN_JAVA_VERSION: dict[DeclarationKind, int] = {
    DeclarationKind.RECORD: 16,
}


def _template(header: str) -> str:
    return f"package %s;\n\n{header} {{\n    \n}}"


DEFAULT_TEMPLATES: MappingProxyType[str, str] = MappingProxyType(
    {
        DeclarationKind.CLASS.value: _template("public class %s"),
        DeclarationKind.INTERFACE.value: _template("public interface %s"),
        DeclarationKind.ENUM.value: _template("public enum %s"),
        DeclarationKind.RECORD.value: _template("public record %s()"),
        DeclarationKind.ABSTRACT_CLASS.value: _template("public abstract class %s"),
    }
)

DEFAULT_IMPORTS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        DeclarationKind.CLASS.value: (),
        DeclarationKind.INTERFACE.value: (),
        DeclarationKind.ENUM.value: (),
        DeclarationKind.RECORD.value: ("java.util.*",),
        DeclarationKind.ABSTRACT_CLASS.value: (),
    }
)


def kind_label(kind: DeclarationKind, *, java_version: int) -> str:
    """Display label, flagging kinds the configured Java level cannot use."""
    label = kind.label
    if java_version < kind.min_java_version:
        label += f" (Java {kind.min_java_version}+)"
    return label


def parse_kind(value: str) -> DeclarationKind | None:
    """Accept both ``abstract_class`` and ``abstract-class`` spellings."""
    try:
        return DeclarationKind(value.replace("-", "_"))
    except ValueError:
        return None
