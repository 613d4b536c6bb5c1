"""Concrete adapters: console sink, emitter, and in-memory sync collaborators."""

from __future__ import annotations

from .console import RichConsoleSink
from .emitter import Emitter
from .memory import MemoryActionLog, MemoryClient, MemorySync

__all__ = ["Emitter", "MemoryActionLog", "MemoryClient", "MemorySync", "RichConsoleSink"]
