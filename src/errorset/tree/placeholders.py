"""
Empty container skeleton for a set of message paths.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..core.path import Path, Segment
from .index import distinct_paths


def build_placeholders(paths: Iterable[Path]) -> Dict[Any, Any]:
    """
    Build nested mappings and lists matching ``paths`` with no messages in them.

    Terminal segments hold an empty list, intermediate ones a mapping. A name
    that continues below a terminal list is given its own mapping entry in
    that list, next to the (empty) list of the terminal's own messages.
    """

    skeleton: Dict[Any, Any] = {}

    for path in distinct_paths(paths):
        node: Any = skeleton
        last = len(path) - 1

        for depth, key in enumerate(path):
            default: Any = {} if depth < last else []

            if isinstance(node, list):
                if isinstance(key, int):
                    node = _list_position(node, key, default)
                    continue
                node = _entry_for(node, key)

            existing = node.get(key)
            if existing is None:
                existing = node[key] = default
            node = existing

    return skeleton


def _entry_for(container: List[Any], key: Optional[Segment]) -> Dict[Any, Any]:
    for entry in container:
        if isinstance(entry, dict) and key in entry:
            return entry
    if not any(isinstance(entry, list) and not entry for entry in container):
        container.append([])
    entry: Dict[Any, Any] = {}
    container.append(entry)
    return entry


def _list_position(container: List[Any], position: int, default: Any) -> Any:
    while len(container) <= position:
        container.append(None)
    if container[position] is None:
        container[position] = default
    return container[position]
