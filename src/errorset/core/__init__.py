"""
Core message types and the message set aggregate.
"""

from .message import LocalizedMessage, Message, interpolate
from .message_set import FrozenMessageSetError, MessageSet
from .path import BASE_PATH, PathError, format_path, normalize_path

__all__ = [
    "BASE_PATH",
    "FrozenMessageSetError",
    "LocalizedMessage",
    "Message",
    "MessageSet",
    "PathError",
    "format_path",
    "interpolate",
    "normalize_path",
]
