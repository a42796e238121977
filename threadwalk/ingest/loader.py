from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Callable, Dict

import yaml

from threadwalk.models.configs import ThreadDocument

logger = logging.getLogger(__name__)

_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".json": json.loads,
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".toml": tomllib.loads,
}


def load_structured_file(path: Path) -> Dict[str, Any]:
    """Parse a thread file into a mapping whose ``comments`` entry, if any, is a list."""

    if not path.exists():
        raise FileNotFoundError(f"Thread file not found: {path}")

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        supported = ", ".join(sorted(_PARSERS))
        raise ValueError(f"Unsupported thread format '{path.suffix}' for {path} (expected {supported})")

    data = parser(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Thread file {path} must contain a mapping at the top level")

    comments = data.get("comments")
    if comments is not None and not isinstance(comments, list):
        raise ValueError(f"'comments' in {path} must be a list, got {type(comments).__name__}")
    return data


def load_thread(path: Path) -> ThreadDocument:
    raw = load_structured_file(path)
    document = ThreadDocument.model_validate(raw)
    logger.debug("Loaded %d comments from %s", len(document.comments), path)
    return document


__all__ = ["load_structured_file", "load_thread"]
