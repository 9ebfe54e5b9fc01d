"""
Validation error raised from a non-empty message set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from ..core.path import format_path, is_base_path

if TYPE_CHECKING:
    from ..core.message_set import MessageSet


class ValidationError(Exception):
    """
    Aggregated validation error carrying the frozen message set.
    """

    def __init__(self, messages: "MessageSet") -> None:
        self.messages = messages.freeze()
        self.errors: Dict[Any, Any] = self.messages.to_dict()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        segments = []
        for message in self.messages:
            prefix = "non-field" if is_base_path(message.path) else format_path(message.path)
            segments.append(f"{prefix}: {message.text}")
        return "; ".join(segments)
