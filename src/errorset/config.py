"""
Message set options and environment loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping


class ConfigurationError(ValueError):
    """Raised when message set options are invalid."""


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


@dataclass(frozen=True)
class MessageSetOptions:
    """
    Options controlling how a message set resolves localized messages.

    ``locale`` is handed to every localized message when the set is frozen;
    ``full`` asks for texts prefixed with the path they belong to.
    """

    locale: str | None = None
    full: bool = False

    @classmethod
    def coerce(cls, value: "MessageSetOptions | Mapping[str, Any] | None") -> "MessageSetOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls().merged(**dict(value))

    @classmethod
    def from_env(cls, prefix: str = "ERRORSET_", **overrides: Any) -> "MessageSetOptions":
        """
        Build options from ``<prefix>LOCALE`` and ``<prefix>FULL``.
        """

        values: dict[str, Any] = {}
        locale = os.getenv(f"{prefix}LOCALE")
        if locale:
            values["locale"] = locale
        full = os.getenv(f"{prefix}FULL")
        if full:
            values["full"] = _parse_bool(full, key=f"{prefix}FULL")
        values.update(overrides)
        return cls().merged(**values)

    def merged(self, **overrides: Any) -> "MessageSetOptions":
        known = {item.name for item in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError(f"Unknown message set option(s): {', '.join(unknown)}")
        return replace(self, **overrides)
