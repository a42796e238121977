"""Plain-text renderers for walked threads."""

from .outline import OutlineRenderer
from .thread import ThreadRendering, render_thread

__all__ = ["OutlineRenderer", "ThreadRendering", "render_thread"]
