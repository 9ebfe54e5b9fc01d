"""
Assemble messages into a nested tree mirroring the validated document.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..core.path import Segment
from .index import IndexNode, build_index


def assemble(messages: Iterable[Any], index: IndexNode | None = None) -> Dict[Any, Any]:
    """
    Place the dump of every message at the location named by its path.

    Leaves are lists of dumps in encounter order. A prefix that holds both
    its own messages and nested failures becomes ``[[own...], {child: ...}]``
    with one slot per child key, as recorded in ``index``. Messages equal to
    one already placed are skipped.
    """

    messages = list(messages)
    if index is None:
        index = build_index(message.path for message in messages)

    tree: Dict[Any, Any] = {}
    placed = set()

    for message in messages:
        if message in placed:
            continue
        placed.add(message)

        path = message.path
        last = len(path) - 1
        node: Any = tree
        index_node = index

        for depth, key in enumerate(path):
            index_node = index_node.children[key]
            base = index_node.array_base

            if base is not None:
                next_node: Any = [[]] if base.slot is not None else []
            else:
                next_node = {}

            if index_node.slot is not None:
                node = _slot_entry(node, index_node.slot, key, next_node)
            else:
                node = node.setdefault(key, next_node)

            if depth == last and base is not None:
                target = node[base.slot] if base.slot is not None else node
                target.append(message.dump())

    return tree


def _slot_entry(container: List[Any], slot: int, key: Optional[Segment], default: Any) -> Any:
    while len(container) <= slot:
        container.append(None)
    entry = container[slot]
    if entry is None:
        entry = container[slot] = {key: default}
    return entry[key]
