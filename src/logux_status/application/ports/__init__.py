"""Protocols the event logger depends on."""

from __future__ import annotations

from .console import ConsolePort
from .sync import ActionLogPort, ClientPort, EventSourcePort, SyncPort

__all__ = ["ActionLogPort", "ClientPort", "ConsolePort", "EventSourcePort", "SyncPort"]
