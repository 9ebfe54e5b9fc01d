"""
Path segments locating a value inside a nested input document.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

Segment = Union[str, int]
Path = Tuple[Optional[Segment], ...]

# Single segment of messages attached to the document as a whole.
BASE_SEGMENT = None
BASE_PATH: Path = (BASE_SEGMENT,)


class PathError(ValueError):
    """Raised when a path contains a segment that cannot locate a value."""


def normalize_path(value: Union[str, Iterable[Optional[Segment]], None]) -> Path:
    """
    Convert ``value`` into a tuple of segments.

    Dotted strings are split on ``.`` and all-digit parts become indices,
    so ``"items.0.name"`` becomes ``("items", 0, "name")``. Empty input maps
    to the base path.
    """

    if value is None:
        return BASE_PATH
    if isinstance(value, str):
        parts = [int(part) if part.isdigit() else part for part in value.split(".")] if value else []
    else:
        parts = list(value)

    if not parts or parts == [BASE_SEGMENT]:
        return BASE_PATH

    for segment in parts:
        _check_segment(segment)
    return tuple(parts)


def _check_segment(segment: object) -> None:
    if isinstance(segment, bool):
        raise PathError(f"Boolean {segment!r} is not a valid path segment")
    if isinstance(segment, int):
        if segment < 0:
            raise PathError(f"Index segments must be non-negative, got {segment}")
        return
    if isinstance(segment, str):
        if not segment:
            raise PathError("Name segments cannot be empty")
        return
    raise PathError(f"Unsupported path segment {segment!r} of type {type(segment).__name__}")


def is_base_path(path: Path) -> bool:
    return path == BASE_PATH


def format_path(path: Path) -> str:
    if is_base_path(path):
        return ""
    return ".".join(str(segment) for segment in path)
