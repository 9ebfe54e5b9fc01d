"""
ErrorSet public package initialization.

Exposes the message types, the message set aggregate and the tree builders
used to export validation failures as nested structures.
"""

from .config import ConfigurationError, MessageSetOptions  # noqa: F401
from .core.message import LocalizedMessage, Message  # noqa: F401
from .core.message_set import FrozenMessageSetError, MessageSet  # noqa: F401
from .core.path import PathError, format_path, normalize_path  # noqa: F401
from .predicates import PredicateRegistry, predicates  # noqa: F401
from .tree import assemble, build_index, build_placeholders  # noqa: F401
from .validation import ValidationError  # noqa: F401

__all__ = [
    "Message",
    "LocalizedMessage",
    "MessageSet",
    "MessageSetOptions",
    "PredicateRegistry",
    "predicates",
    "assemble",
    "build_index",
    "build_placeholders",
    "normalize_path",
    "format_path",
    "ConfigurationError",
    "FrozenMessageSetError",
    "PathError",
    "ValidationError",
]
