from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(slots=True)
class Comment:
    """A single comment in a thread. Only the two ids matter to the walker."""

    comment_id: str
    parent_id: Optional[str] = None
    author: str = ""
    content: str = ""
    comment_type: str = "comment"
    approved: bool = True
    created_at: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_root(self) -> bool:
        return not self.parent_id


@dataclass(slots=True)
class RenderedComment:
    """A comment as it was emitted, with its effective depth."""

    comment: Any
    depth: int
    has_children: bool = False


__all__ = ["Comment", "RenderedComment"]
