from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, List, Tuple

logger = logging.getLogger(__name__)

ChildIndex = Dict[Hashable, List[Any]]


@dataclass(frozen=True, slots=True)
class WalkerFields:
    """Names of the identifier and parent identifier fields on a node."""

    id: str = "comment_id"
    parent: str = "parent_id"


DEFAULT_FIELDS = WalkerFields()


def is_root_parent(parent: Any) -> bool:
    """Empty parents, including the string "0" used by WordPress exports, mean top level."""

    return not parent or parent == "0"


def field_value(element: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an attribute object."""

    if isinstance(element, Mapping):
        return element.get(name)
    return getattr(element, name, None)


def build_child_index(
    elements: Iterable[Any],
    fields: WalkerFields = DEFAULT_FIELDS,
) -> Tuple[List[Any], ChildIndex]:
    """Split elements into top-level ones and a parent id -> children mapping.

    Elements with an empty parent (see :func:`is_root_parent`) are top
    level. When none is, the parent of the first element is taken as the
    root parent and its children become the top level.
    """

    items = list(elements)
    top_level: List[Any] = []
    child_index: ChildIndex = {}

    for element in items:
        parent = field_value(element, fields.parent)
        if is_root_parent(parent):
            top_level.append(element)
        else:
            child_index.setdefault(parent, []).append(element)

    if not top_level and items:
        root_parent = field_value(items[0], fields.parent)
        logger.debug("No top-level elements; treating %r as the root parent", root_parent)
        child_index = {}
        for element in items:
            parent = field_value(element, fields.parent)
            if parent == root_parent:
                top_level.append(element)
            else:
                child_index.setdefault(parent, []).append(element)

    return top_level, child_index


def count_root_elements(elements: Iterable[Any], fields: WalkerFields = DEFAULT_FIELDS) -> int:
    return sum(1 for element in elements if is_root_parent(field_value(element, fields.parent)))


__all__ = [
    "ChildIndex",
    "DEFAULT_FIELDS",
    "WalkerFields",
    "build_child_index",
    "count_root_elements",
    "field_value",
    "is_root_parent",
]
