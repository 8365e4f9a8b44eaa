"""Outcome values returned by every jcreate service.

INVARIANT: Nothing raises past a service.  Invalid input, an existing file,
or a failed write all come back as a failed ServiceResult tagged with an
:class:`~jcreate.domain.errors.ErrorCode`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jcreate.domain.errors import ErrorCode


class ServiceError(BaseModel):
    """Why a request ended without the requested effect."""

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """What a service hands back to the command layer.

    Attributes:
        ok: True when the request did what it was asked.
        op: Operation name; renderers dispatch on it (``"create_file"``).
        data: The operation's payload when ``ok``.
        warnings: Notes for a human reader; scripts may ignore them.
        error: Set exactly when ``ok`` is False.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], *, warnings: Iterable[str] = ()
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=list(warnings))

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
