"""Depth-limited traversal of comment threads."""

from .flatten import reaches_depth_cap, walk
from .index import DEFAULT_FIELDS, ChildIndex, WalkerFields, build_child_index, count_root_elements
from .renderer import CallbackRenderer, RecordingRenderer, Renderer
from .thread_walker import ThreadWalker

__all__ = [
    "CallbackRenderer",
    "ChildIndex",
    "DEFAULT_FIELDS",
    "RecordingRenderer",
    "Renderer",
    "ThreadWalker",
    "WalkerFields",
    "build_child_index",
    "count_root_elements",
    "reaches_depth_cap",
    "walk",
]
