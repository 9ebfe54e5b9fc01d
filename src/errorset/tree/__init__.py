"""
Builders turning flat message paths into nested trees.
"""

from .assembler import assemble
from .index import ArrayBase, IndexNode, build_index, distinct_paths
from .placeholders import build_placeholders

__all__ = [
    "ArrayBase",
    "IndexNode",
    "assemble",
    "build_index",
    "build_placeholders",
    "distinct_paths",
]
