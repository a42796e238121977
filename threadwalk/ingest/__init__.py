"""Loading comment threads from structured files."""

from .loader import load_structured_file, load_thread

__all__ = ["load_structured_file", "load_thread"]
