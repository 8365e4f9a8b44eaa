"""Error codes shared by the domain and service layers."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Every way a generation request can end without a new file."""

    EMPTY_NAME = "EMPTY_NAME"
    INVALID_START = "INVALID_START"
    INVALID_CHARS = "INVALID_CHARS"
    RESERVED_WORD = "RESERVED_WORD"
    INVALID_PACKAGE_SEGMENT = "INVALID_PACKAGE_SEGMENT"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    WRITE_FAILED = "WRITE_FAILED"
    VERSION_GATE_FAILED = "VERSION_GATE_FAILED"
    CANCELLED = "CANCELLED"


class TemplateNotFoundError(KeyError):
    """Raised by rendering when no template is configured for a kind."""

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Template not found for type: {self.kind}"
