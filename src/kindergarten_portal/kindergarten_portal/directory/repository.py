from __future__ import annotations

from typing import Optional, Protocol

from .model import Child, Parent


class DirectoryRepository(Protocol):
    """Read-only child/parent lookup shared by every component."""

    def get_child(self, child_id: str) -> Optional[Child]:
        raise NotImplementedError

    def get_parent(self, parent_id: str) -> Optional[Parent]:
        raise NotImplementedError
