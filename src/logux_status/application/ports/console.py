"""Console port describing the two-channel sink the event logger writes to.

Purpose
-------
Define the abstraction for adapters that print console-style argument lists:
a text with ``%c`` style markers, the matching style directives, then any
structured payload objects.

Contents
--------
* :class:`ConsolePort` - runtime-checkable protocol with ``log``/``error``
  channels and a style capability probe.

System Role
-----------
Keeps :mod:`logux_status.application.use_cases.event_logger` independent of
Rich so tests can record calls with a plain fake.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Print console-style argument lists on a normal and an error channel."""

    def log(self, *args: Any) -> None:
        """Print an informational line."""

    def error(self, *args: Any) -> None:
        """Print an error line."""

    def supports_styles(self) -> bool:
        """Return ``True`` when ``%c`` style directives can be rendered."""


__all__ = ["ConsolePort"]
