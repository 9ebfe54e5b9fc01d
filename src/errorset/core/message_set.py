"""
MessageSet: ordered collection of failure messages exported as a nested tree.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..config import MessageSetOptions
from ..predicates import PredicateRegistry, predicates
from ..tree import assemble, build_index, build_placeholders, distinct_paths
from ..utils.logging import get_logger, time_call
from ..validation.errors import ValidationError
from .path import Path

logger = get_logger("message_set")


class FrozenMessageSetError(RuntimeError):
    """Raised when mutating a message set after it has been frozen."""


def _is_evaluable(message: Any) -> bool:
    return callable(getattr(message, "evaluate", None))


class MessageSet:
    """
    Ordered set of validation messages.

    ``source_messages`` keeps the records as they were added, including
    localized ones that still need a locale; ``messages`` is the live
    sequence that gets exported. Freezing resolves the former into the latter
    and caches the nested export returned by :meth:`to_dict`.
    """

    def __init__(
        self,
        messages: Iterable[Any] = (),
        options: MessageSetOptions | Mapping[str, Any] | None = None,
        *,
        source: Optional[Iterable[Any]] = None,
        registry: Optional[PredicateRegistry] = None,
    ) -> None:
        self._messages: List[Any] = list(messages)
        self._source: List[Any] = list(source) if source is not None else list(self._messages)
        self._options = MessageSetOptions.coerce(options)
        self._registry = registry or predicates
        self._frozen = False
        self._tree: Optional[Dict[Any, Any]] = None
        self._placeholders: Optional[Dict[Any, Any]] = None

    # Accessors ---------------------------------------------------------
    @property
    def messages(self) -> List[Any]:
        return self._messages

    @property
    def source_messages(self) -> List[Any]:
        return self._source

    @property
    def options(self) -> MessageSetOptions:
        return self._options

    @property
    def locale(self) -> str | None:
        return self._options.locale

    @property
    def registry(self) -> PredicateRegistry:
        return self._registry

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def empty(self) -> bool:
        return not self._messages

    @property
    def unique_paths(self) -> List[Path]:
        return distinct_paths(message.path for message in self._source)

    @property
    def placeholders(self) -> Dict[Any, Any]:
        if self._placeholders is None:
            self._placeholders = build_placeholders(self.unique_paths)
        return self._placeholders

    # Public API --------------------------------------------------------
    def add(self, message: Any) -> "MessageSet":
        if self._frozen:
            raise FrozenMessageSetError("Cannot add messages to a frozen MessageSet.")
        self._source.append(message)
        self._messages.append(message)
        self._tree = None
        self._placeholders = None
        return self

    def merge(self, other: Iterable[Any], **options: Any) -> "MessageSet":
        """
        Return a frozen set holding ``other`` plus this set's resolved messages.

        ``options`` override the current ones (typically ``locale``), and the
        source messages are carried over so localized ones are evaluated
        again under the new options.
        """

        incoming = list(other)
        if not options and incoming == self._messages:
            return self

        plain = [message for message in self._messages if not _is_evaluable(message)]
        combined = list(dict.fromkeys(incoming + plain))
        logger.debug(
            "Merging %s messages into set of %s (overrides=%s)",
            len(incoming),
            len(self._messages),
            sorted(options),
        )
        merged = MessageSet(
            combined,
            self._options.merged(**options),
            source=self._source,
            registry=self._registry,
        )
        return merged.freeze()

    def filter(self, *names: str) -> "MessageSet":
        """
        Return a new set with the messages for which every named predicate holds.

        Predicates come from the registry; a name that is not registered for a
        message's type excludes that message.

        Example::

            errors.filter("base")
        """

        selected = [
            message
            for message in self._messages
            if all(self._registry.evaluate(name, message) for name in names)
        ]
        logger.debug("Filtered %s of %s messages by %s", len(selected), len(self._messages), names)
        return MessageSet(selected, registry=self._registry)

    def freeze(self) -> "MessageSet":
        if self._frozen:
            return self

        with time_call("message_set.freeze", logger) as stats:
            resolved, stats["count"] = self._resolve(from_source=True)
            tree = assemble(resolved, self._build_index(resolved))

        self._messages = resolved
        self._tree = tree
        self._frozen = True
        logger.debug("Froze message set with %s evaluated message(s), locale=%s", stats["count"], self.locale)
        return self

    def to_dict(self) -> Dict[Any, Any]:
        if self._tree is None:
            resolved, _ = self._resolve(from_source=False)
            self._tree = assemble(resolved, self._build_index(resolved))
        return self._tree

    to_h = to_dict

    def fetch(self, key: Any) -> Any:
        value = self[key]
        if value is None:
            raise KeyError(f"{key!r} not found in message set")
        return value

    def raise_if_errors(self) -> None:
        if self._messages:
            raise ValidationError(self)

    # Internal helpers --------------------------------------------------
    def _resolve(self, *, from_source: bool) -> Tuple[List[Any], int]:
        """
        Evaluate localized messages under the configured options.

        With ``from_source`` each localized source message replaces the live
        entry at its index (appended past the end). Live entries that are still
        unresolved afterwards, such as ones passed to :meth:`merge`, are
        evaluated in place. Returns a new sequence; ``self`` is not modified.
        """

        resolved = list(self._messages)
        evaluated = 0
        if from_source:
            for idx, message in enumerate(self._source):
                if not _is_evaluable(message):
                    continue
                result = message.evaluate(locale=self.locale, full=self._options.full)
                if idx < len(resolved):
                    resolved[idx] = result
                else:
                    resolved.append(result)
                evaluated += 1
        for idx, message in enumerate(resolved):
            if _is_evaluable(message):
                resolved[idx] = message.evaluate(locale=self.locale, full=self._options.full)
                evaluated += 1
        return resolved, evaluated

    def _build_index(self, messages: List[Any]):
        paths = [message.path for message in self._source]
        paths.extend(message.path for message in messages)
        return build_index(paths)

    # Collection protocol -----------------------------------------------
    def __getitem__(self, key: Any) -> Any:
        return self.to_dict().get(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageSet):
            return NotImplemented
        return self._messages == other._messages and self._options == other._options

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<MessageSet {len(self._messages)} message(s) {state} locale={self.locale!r}>"
