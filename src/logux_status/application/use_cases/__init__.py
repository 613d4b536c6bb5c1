"""Use cases wiring sync events to console lines."""

from __future__ import annotations

from .event_logger import create_event_logger
from .formatting import ConsoleMessage, build_console_args, emphasize, format_message, plain
from .subscription import Subscription, subscribe

__all__ = [
    "ConsoleMessage",
    "Subscription",
    "build_console_args",
    "create_event_logger",
    "emphasize",
    "format_message",
    "plain",
    "subscribe",
]
