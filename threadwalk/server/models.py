from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from threadwalk.models.configs import CommentRecord


class RenderRequest(BaseModel):
    """Client payload: comments in stored order and an optional depth cap."""

    comments: List[CommentRecord] = Field(default_factory=list)
    max_depth: int | None = Field(default=None, ge=-1, description="-1 flat, 0 unlimited, N levels")


class RenderedItem(BaseModel):
    comment_id: str
    parent_id: str | None = None
    author: str
    depth: int
    has_children: bool


class RenderResponse(BaseModel):
    max_depth: int
    count: int
    items: List[RenderedItem]
    outline: str


__all__ = ["RenderRequest", "RenderResponse", "RenderedItem"]
