"""Synchronous event emitter used by the in-memory collaborators."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

from logux_status.application.ports.sync import Unbind


class Emitter:
    """Deliver events to listeners in registration order.

    Examples
    --------
    >>> seen = []
    >>> emitter = Emitter()
    >>> unbind = emitter.on("state", seen.append)
    >>> emitter.emit("state", "connecting")
    >>> unbind()
    >>> emitter.emit("state", "synchronized")
    >>> seen
    ['connecting']
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[str, list[Callable[..., None]]] = defaultdict(list)

    def on(self, event: str, callback: Callable[..., None]) -> Unbind:
        """Register ``callback`` and return a callable removing it again."""

        listeners = self._listeners[event]
        listeners.append(callback)

        def unbind() -> None:
            # Unbinding twice is a no-op.
            for index, listener in enumerate(listeners):
                if listener is callback:
                    del listeners[index]
                    return

        return unbind

    def emit(self, event: str, *args: Any) -> None:
        """Call every listener of ``event`` with ``args``."""

        for listener in list(self._listeners.get(event, ())):
            listener(*args)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))


__all__ = ["Emitter"]
