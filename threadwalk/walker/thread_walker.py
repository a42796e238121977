from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, List, Set, Tuple

from threadwalk.walker.flatten import RenderFn, reaches_depth_cap, walk
from threadwalk.walker.index import (
    DEFAULT_FIELDS,
    ChildIndex,
    WalkerFields,
    build_child_index,
    count_root_elements,
    field_value,
)
from threadwalk.walker.renderer import Renderer

logger = logging.getLogger(__name__)

_VISIT = "visit"
_END_ELEMENT = "end_element"
_END_LEVEL = "end_level"
_RELEASE = "release"


class ThreadWalker:
    """Drives a renderer over a flat list of comments, level by level.

    Replies are nested one level per generation until ``max_depth`` is
    reached; from there on whole subtrees are flattened onto the deepest
    allowed level (see :func:`threadwalk.walker.flatten.walk`).

    ``max_depth`` semantics:

    * ``-1`` renders every comment flat, in input order
    * ``0`` nests without limit and appends orphaned replies at the end
    * ``N > 0`` never renders deeper than ``N`` levels
    """

    def __init__(self, renderer: Renderer, fields: WalkerFields = DEFAULT_FIELDS) -> None:
        self.renderer = renderer
        self.fields = fields

    def walk(self, elements: Iterable[Any], max_depth: int, context: Any = None) -> int:
        """Render ``elements`` and return how many comments were emitted."""

        if max_depth < -1:
            raise ValueError(f"max_depth must be -1 or greater, got {max_depth}")

        items = list(elements)
        if not items:
            return 0

        logger.debug("Walking %d comments with max_depth=%d", len(items), max_depth)
        emitted = 0

        if max_depth == -1:
            for element in items:
                emitted += self.display_element(element, {}, 1, 0, context)
            return emitted

        top_level, child_index = build_child_index(items, self.fields)
        for element in top_level:
            emitted += self.display_element(element, child_index, max_depth, 0, context)

        if max_depth == 0 and child_index:
            logger.debug("Rendering %d orphaned reply groups flat", len(child_index))
            for orphans in list(child_index.values()):
                for orphan in orphans:
                    emitted += self.display_element(orphan, {}, 1, 0, context)

        return emitted

    def display_element(
        self,
        element: Any,
        child_index: ChildIndex,
        max_depth: int,
        depth: int,
        context: Any = None,
    ) -> int:
        """Render ``element`` at ``depth`` together with the replies it owns.

        Consumed entries are removed from ``child_index``.
        """

        if element is None:
            return 0

        emitted = 0
        stack: List[Tuple[str, Any, int]] = [(_VISIT, element, depth)]
        expanding: Set[Hashable] = set()

        while stack:
            action, item, level = stack.pop()

            if action == _END_ELEMENT:
                self.renderer.end_element(item, level, context)
                continue
            if action == _END_LEVEL:
                self.renderer.end_level(level, context)
                continue
            if action == _RELEASE:
                expanding.discard(item)
                child_index.pop(item, None)
                continue

            if item is None:
                continue

            if reaches_depth_cap(max_depth, level):
                emitted += walk(
                    item,
                    child_index,
                    max_depth,
                    level,
                    context,
                    self._flat_render(child_index),
                    fields=self.fields,
                )
                continue

            item_id = field_value(item, self.fields.id)
            if item_id in expanding:
                raise ValueError(f"Comment {item_id!r} is its own ancestor")

            children = child_index.get(item_id)
            self.renderer.start_element(item, level, bool(children), context)
            emitted += 1
            stack.append((_END_ELEMENT, item, level))

            descend = max_depth == 0 or max_depth > level + 1
            if children is None or not descend:
                continue

            if children:
                stack.append((_END_LEVEL, None, level))
            stack.append((_RELEASE, item_id, level))
            expanding.add(item_id)
            stack.extend((_VISIT, child, level + 1) for child in reversed(children))
            if children:
                self.renderer.start_level(level, context)

        return emitted

    def count_root_elements(self, elements: Iterable[Any]) -> int:
        return count_root_elements(elements, self.fields)

    def _flat_render(self, child_index: ChildIndex) -> RenderFn:
        renderer = self.renderer
        id_field = self.fields.id

        def render(node: Any, depth: int, context: Any) -> None:
            has_children = bool(child_index.get(field_value(node, id_field)))
            renderer.start_element(node, depth, has_children, context)
            renderer.end_element(node, depth, context)

        return render


__all__ = ["ThreadWalker"]
