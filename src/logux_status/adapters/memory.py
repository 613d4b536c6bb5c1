"""In-process sync collaborators for demos, tests, and local tooling.

Purpose
-------
Provide small, deterministic stand-ins for a synchronization client and its
append-only action log. They emit the same events as the real components so
:func:`logux_status.log` can be exercised without a server.

Contents
--------
* :class:`MemoryActionLog` - keeps actions while they have reasons.
* :class:`MemorySync` - connection status fields plus lifecycle events.
* :class:`MemoryClient` - handle exposing ``sync``.

System Role
-----------
Adapters implementing :class:`~logux_status.application.ports.sync.ActionLogPort`
and :class:`~logux_status.application.ports.sync.SyncPort`; used by the
``demo`` CLI command and the test-suite.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from logux_status.application.ports.sync import ADD_EVENT, CLEAN_EVENT, STATE_EVENT, Unbind

from .emitter import Emitter


class MemoryActionLog:
    """Append-only action log living in memory.

    Every added action gets ``id`` (``"<n> <node> 0"``), ``time``, ``added``
    and ``reasons`` metadata. Actions without reasons are cleaned right after
    being added.
    """

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        self._emitter = Emitter()
        self._entries: list[tuple[Any, dict[str, Any]]] = []
        self._last_added = 0

    def on(self, event: str, callback: Callable[..., None]) -> Unbind:
        return self._emitter.on(event, callback)

    def add(self, action: Any, meta: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Store ``action`` and emit ``add`` (and ``clean`` when it has no reasons).

        Examples
        --------
        >>> log = MemoryActionLog("test1")
        >>> log.add({"type": "A"}, {"reasons": ["test"]})["id"]
        '1 test1 0'
        """

        self._last_added += 1
        stored = dict(meta or {})
        stored.setdefault("id", f"{self._last_added} {self.node_id} 0")
        stored.setdefault("time", self._last_added)
        stored["reasons"] = list(stored.get("reasons", []))
        stored["added"] = self._last_added
        self._emitter.emit(ADD_EVENT, action, stored)
        if stored["reasons"]:
            self._entries.append((action, stored))
        else:
            self._emitter.emit(CLEAN_EVENT, action, stored)
        return stored

    def remove_reason(self, reason: str) -> int:
        """Drop ``reason`` from every entry and clean entries left without one.

        Returns the number of cleaned actions.
        """

        kept: list[tuple[Any, dict[str, Any]]] = []
        cleaned: list[tuple[Any, dict[str, Any]]] = []
        for action, meta in self._entries:
            if reason in meta["reasons"]:
                meta["reasons"] = [item for item in meta["reasons"] if item != reason]
            (kept if meta["reasons"] else cleaned).append((action, meta))
        self._entries = kept
        for action, meta in cleaned:
            self._emitter.emit(CLEAN_EVENT, action, meta)
        return len(cleaned)

    def entries(self) -> list[tuple[Any, dict[str, Any]]]:
        return list(self._entries)


class MemorySync:
    """Connection status of one node with its lifecycle events."""

    supports_debug = True

    def __init__(
        self,
        local_node_id: str,
        log: MemoryActionLog | None = None,
        *,
        remote_node_id: str | None = None,
        connection_url: str | None = None,
    ) -> None:
        self.local_node_id = local_node_id
        self.remote_node_id = remote_node_id
        self.connection_url = connection_url
        self.log = log if log is not None else MemoryActionLog(local_node_id)
        self.state = "disconnected"
        self.connected = False
        self._emitter = Emitter()

    def on(self, event: str, callback: Callable[..., None]) -> Unbind:
        return self._emitter.on(event, callback)

    def emit(self, event: str, *args: Any) -> None:
        """Deliver ``event`` directly; used to replay errors and debug traces."""

        self._emitter.emit(event, *args)

    def set_state(self, state: str) -> None:
        self.state = state
        self._emitter.emit(STATE_EVENT)


@dataclass(slots=True)
class MemoryClient:
    """Client handle exposing :attr:`sync`."""

    sync: MemorySync


__all__ = ["MemoryActionLog", "MemoryClient", "MemorySync"]
