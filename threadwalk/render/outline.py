from __future__ import annotations

from typing import Any, List

from threadwalk.walker.index import field_value
from threadwalk.walker.renderer import RecordingRenderer


class OutlineRenderer(RecordingRenderer):
    """Render a thread as indented text, one line per comment.

    Emitted comments and events are recorded as well, so a single walk
    yields both the structured entries and the text.
    """

    def __init__(self, indent: str = "  ") -> None:
        super().__init__()
        self.indent = indent
        self.lines: List[str] = []

    def start_element(self, element: Any, depth: int, has_children: bool, context: Any) -> None:
        super().start_element(element, depth, has_children, context)
        author = field_value(element, "author") or "anonymous"
        content = (field_value(element, "content") or "").strip()
        summary = content.splitlines()[0] if content else ""
        self.lines.append(f"{self.indent * depth}{author}: {summary}".rstrip())

    def text(self) -> str:
        return "\n".join(self.lines)


__all__ = ["OutlineRenderer"]
