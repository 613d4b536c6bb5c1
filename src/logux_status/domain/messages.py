"""Toggle set deciding which sync events reach the console.

Purpose
-------
Capture the caller's message preferences as an immutable value object so the
event logger can decide once, at setup time, which subscriptions to make.

Contents
--------
* :class:`LogMessages` - frozen dataclass with one flag per message category.

System Role
-----------
Domain value consumed by :func:`logux_status.log` and produced by the
configuration helpers in :mod:`logux_status.config`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping


@dataclass(slots=True, frozen=True)
class LogMessages:
    """Enabled message categories for one logger instance.

    Attributes
    ----------
    state:
        Print connection state changes.
    error:
        Print errors sent by the server or raised by the client.
    add:
        Print actions added to the action log.
    clean:
        Print actions cleaned from the action log.
    color:
        Request styled output. The console may still refuse styles.
    """

    state: bool = True
    error: bool = True
    add: bool = True
    clean: bool = True
    color: bool = True

    @classmethod
    def from_mapping(cls, options: "Mapping[str, Any] | LogMessages | None") -> "LogMessages":
        """Build toggles from a plain mapping, rejecting unknown keys.

        Examples
        --------
        >>> LogMessages.from_mapping({"add": False}).add
        False
        >>> LogMessages.from_mapping(None) == LogMessages()
        True
        """
        if options is None:
            return cls()
        if isinstance(options, LogMessages):
            return options
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown message option(s): {', '.join(unknown)}")
        return cls(**{key: bool(value) for key, value in options.items()})

    def replace(self, **changes: Any) -> "LogMessages":
        """Return a copy with ``changes`` applied."""

        return replace(self, **changes)

    def to_dict(self) -> dict[str, bool]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


__all__ = ["LogMessages"]
