from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from threadwalk.models.comment import Comment


class CommentRecord(BaseModel):
    """A comment as it appears in thread files and API payloads."""

    comment_id: str = Field(min_length=1)
    parent_id: str | None = None
    author: str = ""
    content: str = ""
    comment_type: str = "comment"
    approved: bool = True
    created_at: str | None = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("comment_id", "parent_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        # Numeric ids are common in exported threads; WordPress exports "0" for "no parent".
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value) if value else None
        if isinstance(value, str) and value.strip() in {"", "0"}:
            return None
        return value

    def to_comment(self) -> Comment:
        return Comment(
            comment_id=self.comment_id,
            parent_id=self.parent_id,
            author=self.author,
            content=self.content,
            comment_type=self.comment_type,
            approved=self.approved,
            created_at=self.created_at,
            metadata=dict(self.metadata),
        )


class ThreadDocument(BaseModel):
    """A thread file: comments in their stored order plus an optional depth cap."""

    comments: List[CommentRecord] = Field(default_factory=list)
    max_depth: int | None = Field(default=None, ge=-1)
    title: str | None = None

    def to_comments(self) -> List[Comment]:
        return [record.to_comment() for record in self.comments]


__all__ = ["CommentRecord", "ThreadDocument"]
