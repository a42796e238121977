"""Depth-limited rendering of threaded comment collections."""

from .models.comment import Comment, RenderedComment
from .walker import ThreadWalker, build_child_index, walk

__all__ = ["Comment", "RenderedComment", "ThreadWalker", "build_child_index", "walk"]
