from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from threadwalk.models.comment import RenderedComment
from threadwalk.walker.flatten import RenderFn

RenderEvent = Tuple[str, Optional[Any], int]


class Renderer(ABC):
    """Receives the walker's output events in traversal order.

    Renderers must not touch the child index the walker is consuming.
    Anything they raise aborts the walk.
    """

    def start_level(self, depth: int, context: Any) -> None:
        """Called before the first reply of a node rendered at ``depth``."""

    def end_level(self, depth: int, context: Any) -> None:
        """Called after the last reply of a node rendered at ``depth``."""

    @abstractmethod
    def start_element(self, element: Any, depth: int, has_children: bool, context: Any) -> None:
        """Render a single comment at its effective depth."""

    def end_element(self, element: Any, depth: int, context: Any) -> None:
        """Called once the comment and its nested replies are done."""


class CallbackRenderer(Renderer):
    """Adapts a plain ``render(node, depth, context)`` callable."""

    def __init__(self, render: RenderFn) -> None:
        self.render = render

    def start_element(self, element: Any, depth: int, has_children: bool, context: Any) -> None:
        self.render(element, depth, context)


class RecordingRenderer(Renderer):
    """Keeps every emitted comment and the full event log in memory."""

    def __init__(self) -> None:
        self.entries: List[RenderedComment] = []
        self.events: List[RenderEvent] = []

    def start_level(self, depth: int, context: Any) -> None:
        self.events.append(("start_level", None, depth))

    def end_level(self, depth: int, context: Any) -> None:
        self.events.append(("end_level", None, depth))

    def start_element(self, element: Any, depth: int, has_children: bool, context: Any) -> None:
        self.entries.append(RenderedComment(comment=element, depth=depth, has_children=has_children))
        self.events.append(("start_element", element, depth))

    def end_element(self, element: Any, depth: int, context: Any) -> None:
        self.events.append(("end_element", element, depth))


__all__ = ["CallbackRenderer", "RecordingRenderer", "RenderEvent", "Renderer"]
