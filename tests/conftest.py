from __future__ import annotations

from io import StringIO
from typing import Any

import pytest
from rich.console import Console

from logux_status.adapters import MemoryClient, MemorySync
from logux_status.application.ports.console import ConsolePort


class RecordingConsole(ConsolePort):
    """Console fake remembering every call per channel."""

    def __init__(self, *, styles: bool = True) -> None:
        self.styles = styles
        self.logs: list[tuple[Any, ...]] = []
        self.errors: list[tuple[Any, ...]] = []

    def log(self, *args: Any) -> None:
        self.logs.append(args)

    def error(self, *args: Any) -> None:
        self.errors.append(args)

    def supports_styles(self) -> bool:
        return self.styles


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def sync() -> MemorySync:
    return MemorySync("test1", remote_node_id="server", connection_url=None)


@pytest.fixture
def client(sync: MemorySync) -> MemoryClient:
    return MemoryClient(sync)


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)
