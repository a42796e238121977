from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Iterator, List, Set, Tuple

from threadwalk.walker.index import DEFAULT_FIELDS, ChildIndex, WalkerFields, field_value

logger = logging.getLogger(__name__)

RenderFn = Callable[[Any, int, Any], Any]

_EXHAUSTED = object()


def reaches_depth_cap(max_depth: int, depth: int) -> bool:
    """True when children of a node at ``depth`` would land on or past the cap."""

    return max_depth > 0 and max_depth <= depth + 1


def walk(
    node: Any,
    child_index: ChildIndex,
    max_depth: int,
    depth: int,
    context: Any,
    render: RenderFn,
    *,
    fields: WalkerFields = DEFAULT_FIELDS,
) -> int:
    """Render ``node`` and, at the depth cap, its whole subtree at the same depth.

    Once the next level would reach ``max_depth`` the node's descendants are
    emitted in pre-order as siblings at ``depth`` instead of being nested any
    deeper, so deep replies are never orphaned at the end of the thread.
    Every child list consumed this way is removed from ``child_index``, which
    makes the index single use. Below the cap children are left alone for the
    driver to visit at ``depth + 1``.

    Returns the number of nodes rendered. Errors raised by ``render`` abort
    the walk immediately.
    """

    if node is None:
        return 0

    render(node, depth, context)
    emitted = 1

    node_id = field_value(node, fields.id)
    if not reaches_depth_cap(max_depth, depth) or node_id not in child_index:
        return emitted

    logger.debug("Flattening replies of %r at depth %d", node_id, depth)
    stack: List[Tuple[Hashable, Iterator[Any]]] = [(node_id, iter(child_index[node_id]))]
    expanding: Set[Hashable] = {node_id}

    while stack:
        parent_id, pending = stack[-1]
        child = next(pending, _EXHAUSTED)
        if child is _EXHAUSTED:
            stack.pop()
            expanding.discard(parent_id)
            child_index.pop(parent_id, None)
            continue
        if child is None:
            continue

        child_id = field_value(child, fields.id)
        if child_id in expanding:
            raise ValueError(f"Comment {child_id!r} is its own ancestor")

        render(child, depth, context)
        emitted += 1

        if child_id in child_index:
            stack.append((child_id, iter(child_index[child_id])))
            expanding.add(child_id)

    return emitted


__all__ = ["RenderFn", "reaches_depth_cap", "walk"]
