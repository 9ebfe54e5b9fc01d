"""
Path index describing where list slots occur in the exported message tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..core.path import Path, Segment


@dataclass
class ArrayBase:
    """
    Marks a prefix that collects messages in a list.

    ``slot`` is 0 once other prefixes nest below the base; the base's own
    messages then live at ``container[0]`` and each child at its own slot.
    """

    slot: Optional[int] = None


@dataclass
class IndexNode:
    children: Dict[Optional[Segment], "IndexNode"] = field(default_factory=dict)
    slot: Optional[int] = None
    array_base: Optional[ArrayBase] = None

    def child(self, key: Optional[Segment]) -> "IndexNode":
        node = self.children.get(key)
        if node is None:
            node = self.children[key] = IndexNode()
        return node

    def lookup(self, path: Iterable[Optional[Segment]]) -> "IndexNode":
        node = self
        for key in path:
            node = node.children[key]
        return node


def distinct_paths(paths: Iterable[Path]) -> List[Path]:
    return list(dict.fromkeys(tuple(path) for path in paths))


def build_index(paths: Iterable[Path]) -> IndexNode:
    root = IndexNode()
    ordered = sorted(distinct_paths(paths), key=len)

    depth = 0
    pending = ordered
    while pending:
        pending = [path for path in ordered if len(path) > depth]
        for path in pending:
            parent = root.lookup(path[:depth])
            node = parent.child(path[depth])

            if depth > 0 and parent.array_base is not None:
                if node.slot is None:
                    node.slot = len(parent.children)
                if parent.array_base.slot is None:
                    parent.array_base.slot = 0

            if len(path) == depth + 1 and node.array_base is None:
                node.array_base = ArrayBase()
        depth += 1

    return root
