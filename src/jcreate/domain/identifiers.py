"""Identifier rules for Java type names and package names.

Reserved words are compared case-sensitively, so ``Class`` is a legal
type name while ``class`` is not.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from jcreate.domain.errors import ErrorCode

RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "try",
        "void",
        "volatile",
        "while",
        "true",
        "false",
    }
)

_START_RE = re.compile(r"[A-Za-z_]")
_IDENTIFIER_RE = re.compile(r"[A-Za-z0-9_]*")


@dataclass(frozen=True)
class IdentifierCheck:
    """Outcome of validating a name or package.

    For package failures, *segment* is the offending segment and *cause*
    holds the check that failed on it.
    """

    valid: bool
    error: ErrorCode | None = None
    message: str = ""
    segment: str | None = None
    cause: IdentifierCheck | None = None


_OK = IdentifierCheck(valid=True)


def _fail(code: ErrorCode, message: str) -> IdentifierCheck:
    return IdentifierCheck(valid=False, error=code, message=message)


def validate_name(name: str | None) -> IdentifierCheck:
    """Check a single identifier (type name or package segment)."""
    if not name:
        return _fail(ErrorCode.EMPTY_NAME, "Name cannot be empty")
    if not _START_RE.match(name):
        return _fail(ErrorCode.INVALID_START, "Name must start with a letter or underscore")
    if not _IDENTIFIER_RE.fullmatch(name):
        return _fail(
            ErrorCode.INVALID_CHARS,
            "Name can only contain letters, numbers, and underscores",
        )
    if name in RESERVED_WORDS:
        return _fail(ErrorCode.RESERVED_WORD, f"Name cannot be a Java keyword: {name}")
    return _OK


def validate_package(package: str | None) -> IdentifierCheck:
    """Check a dotted package name. Empty means the unnamed package."""
    if not package:
        return _OK

    for segment in package.split("."):
        check = validate_name(segment)
        if not check.valid:
            return IdentifierCheck(
                valid=False,
                error=ErrorCode.INVALID_PACKAGE_SEGMENT,
                message=f"segment {segment!r}: {check.message}",
                segment=segment,
                cause=check,
            )
    return _OK
