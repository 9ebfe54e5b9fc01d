"""
Named predicates used to filter message sets.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, Optional, Type

PredicateFunction = Callable[[Any], bool]


class PredicateRegistry:
    """
    Maintains global and per-message-type predicate functions.

    A predicate registered for a message type takes precedence over a global
    one with the same name; lookups follow the message class MRO.
    """

    def __init__(self) -> None:
        self._global_predicates: Dict[str, PredicateFunction] = {}
        self._type_predicates: Dict[type, Dict[str, PredicateFunction]] = defaultdict(dict)

    def register(
        self,
        name: str,
        predicate: PredicateFunction,
        *,
        message_type: Optional[Type[Any]] = None,
    ) -> None:
        if message_type is not None:
            self._type_predicates[message_type][name] = predicate
        else:
            self._global_predicates[name] = predicate

    def resolve(self, name: str, message: Any) -> Optional[PredicateFunction]:
        for klass in type(message).__mro__:
            predicate = self._type_predicates.get(klass, {}).get(name)
            if predicate is not None:
                return predicate
        return self._global_predicates.get(name)

    def evaluate(self, name: str, message: Any) -> bool:
        predicate = self.resolve(name, message)
        if predicate is None:
            return False
        return bool(predicate(message))

    def names(self) -> list[str]:
        known = set(self._global_predicates)
        for table in self._type_predicates.values():
            known.update(table)
        return sorted(known)

    def copy(self) -> "PredicateRegistry":
        clone = PredicateRegistry()
        clone._global_predicates.update(self._global_predicates)
        for message_type, table in self._type_predicates.items():
            clone._type_predicates[message_type].update(table)
        return clone

    def clear(self) -> None:
        self._global_predicates.clear()
        self._type_predicates.clear()


def _register_builtins(registry: PredicateRegistry) -> None:
    from ..core.message import LocalizedMessage, Message

    registry.register("base", lambda message: message.base, message_type=Message)
    registry.register("base", lambda message: message.base, message_type=LocalizedMessage)
    registry.register("localized", lambda message: False, message_type=Message)
    registry.register("localized", lambda message: True, message_type=LocalizedMessage)
    registry.register("resolved", lambda message: True, message_type=Message)
    registry.register("resolved", lambda message: False, message_type=LocalizedMessage)


def default_registry() -> PredicateRegistry:
    registry = PredicateRegistry()
    _register_builtins(registry)
    return registry


predicates = default_registry()
