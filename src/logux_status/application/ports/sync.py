"""Ports describing the synchronization client observed by the event logger.

Purpose
-------
Spell out the narrow surface the logger reads from the external sync and
action-log components, without depending on any concrete implementation.

Contents
--------
* Event name constants.
* :class:`EventSourcePort` - ``on(event, callback)`` returning an unbind callable.
* :class:`ActionLogPort`, :class:`SyncPort`, :class:`ClientPort`.

System Role
-----------
Implemented by :mod:`logux_status.adapters.memory` for demos and tests and by
host applications wrapping their real sync client.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

STATE_EVENT = "state"
ERROR_EVENT = "error"
CLIENT_ERROR_EVENT = "client_error"
DEBUG_EVENT = "debug"
ADD_EVENT = "add"
CLEAN_EVENT = "clean"

CONNECTING_STATE = "connecting"

Unbind = Callable[[], None]


@runtime_checkable
class EventSourcePort(Protocol):
    """Anything accepting event listeners and returning their unbind callable."""

    def on(self, event: str, callback: Callable[..., None]) -> Unbind:
        """Register ``callback`` for ``event``."""


@runtime_checkable
class ActionLogPort(EventSourcePort, Protocol):
    """Append-only action log emitting ``add`` and ``clean`` with ``(action, meta)``."""


@runtime_checkable
class SyncPort(EventSourcePort, Protocol):
    """Connection lifecycle of one node.

    ``supports_debug`` declares whether the ``debug`` event exists. The logger
    reads it once, when it subscribes.
    """

    state: str
    connected: bool
    local_node_id: str
    remote_node_id: str | None
    connection_url: str | None
    log: ActionLogPort
    supports_debug: bool


@runtime_checkable
class ClientPort(Protocol):
    """Handle exposing the observed sync object."""

    sync: Any


__all__ = [
    "ADD_EVENT",
    "ActionLogPort",
    "CLEAN_EVENT",
    "CLIENT_ERROR_EVENT",
    "CONNECTING_STATE",
    "ClientPort",
    "DEBUG_EVENT",
    "ERROR_EVENT",
    "EventSourcePort",
    "STATE_EVENT",
    "SyncPort",
    "Unbind",
]
