from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List

from threadwalk.models.comment import RenderedComment
from threadwalk.render.outline import OutlineRenderer
from threadwalk.walker.index import DEFAULT_FIELDS, WalkerFields
from threadwalk.walker.thread_walker import ThreadWalker


@dataclass(slots=True)
class ThreadRendering:
    """Emitted comments with their effective depths, plus a text outline."""

    entries: List[RenderedComment]
    outline: str


def render_thread(
    comments: Iterable[Any],
    max_depth: int,
    *,
    indent: str = "  ",
    fields: WalkerFields = DEFAULT_FIELDS,
) -> ThreadRendering:
    renderer = OutlineRenderer(indent=indent)
    ThreadWalker(renderer, fields).walk(comments, max_depth)
    return ThreadRendering(entries=renderer.entries, outline=renderer.text())


__all__ = ["ThreadRendering", "render_thread"]
