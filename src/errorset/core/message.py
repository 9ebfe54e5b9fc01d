"""
Message records produced by validation rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from .path import Path, format_path, is_base_path, normalize_path

Translator = Callable[[str, Optional[str], Mapping[str, Any]], str]


def interpolate(template: str, locale: str | None, tokens: Mapping[str, Any]) -> str:
    """
    Default translator: ignores the locale and fills ``{token}`` fields.
    """

    return template.format(**tokens)


@dataclass(frozen=True)
class Message:
    """
    A resolved failure message attached to a path.

    Two messages are equal when both their path and text match; ``meta`` is
    carried into the dump but never compared.
    """

    text: str
    path: Path = ()
    meta: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))

    @classmethod
    def base_message(cls, text: str, **meta: Any) -> "Message":
        return cls(text, None, meta)

    @property
    def base(self) -> bool:
        return is_base_path(self.path)

    @property
    def localized(self) -> bool:
        return False

    def dump(self) -> Any:
        if not self.meta:
            return self.text
        return {"text": self.text, **self.meta}


@dataclass(frozen=True)
class LocalizedMessage:
    """
    A message whose text depends on the locale it is rendered in.

    The text is produced by ``translator`` only when :meth:`evaluate` is
    called, normally once when the owning message set is frozen.
    """

    template: str
    path: Path = ()
    tokens: Mapping[str, Any] = field(default_factory=dict, compare=False)
    meta: Mapping[str, Any] = field(default_factory=dict, compare=False)
    translator: Translator = field(default=interpolate, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))

    @property
    def base(self) -> bool:
        return is_base_path(self.path)

    @property
    def localized(self) -> bool:
        return True

    def evaluate(self, locale: str | None = None, full: bool = False) -> Message:
        text = self.translator(self.template, locale, self.tokens)
        if full and not self.base:
            text = f"{format_path(self.path)} {text}"
        return Message(text, self.path, dict(self.meta))

    def dump(self) -> Any:
        return self.evaluate().dump()
