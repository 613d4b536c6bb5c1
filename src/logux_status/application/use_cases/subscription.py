"""Subscription handles pairing an event listener with its detach call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from logux_status.application.ports.sync import EventSourcePort, Unbind


@dataclass(slots=True)
class Subscription:
    """Listener registered on an event source.

    Attributes
    ----------
    event:
        Event name the callback listens to.
    callback:
        Listener handed to the source.
    """

    event: str
    callback: Callable[..., None]
    _unbind: Unbind = field(repr=False)

    def detach(self) -> None:
        """Stop future deliveries to :attr:`callback`."""

        self._unbind()


def subscribe(source: EventSourcePort, event: str, callback: Callable[..., None]) -> Subscription:
    """Register ``callback`` on ``source`` and return its handle."""

    return Subscription(event=event, callback=callback, _unbind=source.on(event, callback))


__all__ = ["Subscription", "subscribe"]
