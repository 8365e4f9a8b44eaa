"""BaseService: common foundation for jcreate services.

Every service receives a :class:`Workspace` at construction time.  The
workspace carries the frozen settings and the memoized project layout for
the current request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jcreate.infrastructure.workspace import Workspace


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CreateService(BaseService):
            def create_file(self, kind: str, name: str, package: str) -> ServiceResult:
                root = self._workspace.source_root
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace
