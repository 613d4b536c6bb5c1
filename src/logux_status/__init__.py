"""Public package surface: print sync client events to the console.

``log(client)`` subscribes to the state, error, and action-log events of
``client.sync`` and returns a callable detaching every listener again.
"""

from __future__ import annotations

from .adapters import Emitter, MemoryActionLog, MemoryClient, MemorySync, RichConsoleSink
from .application.ports import ActionLogPort, ClientPort, ConsolePort, EventSourcePort, SyncPort
from .application.use_cases import (
    ConsoleMessage,
    Subscription,
    build_console_args,
    emphasize,
    format_message,
    subscribe,
)
from .domain import LogMessages, SyncError
from .logux_status import log, summary_info

__all__ = [
    "ActionLogPort",
    "ClientPort",
    "ConsoleMessage",
    "ConsolePort",
    "Emitter",
    "EventSourcePort",
    "LogMessages",
    "MemoryActionLog",
    "MemoryClient",
    "MemorySync",
    "RichConsoleSink",
    "Subscription",
    "SyncError",
    "SyncPort",
    "build_console_args",
    "emphasize",
    "format_message",
    "log",
    "subscribe",
    "summary_info",
]
