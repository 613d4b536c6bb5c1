"""Façade wiring a sync client, the console sink, and the event logger.

Purpose
-------
Expose the single public entry point :func:`log` and translate its loose
keyword arguments into the ports and values the use case expects.

Contents
--------
* :func:`log` - attach console output to a client and return teardown.
* :func:`summary_info` - metadata banner used by the CLI.

System Role
-----------
Composition root of the package: picks the default Rich sink and normalises
message options before delegating to
:func:`logux_status.application.use_cases.event_logger.create_event_logger`.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from .adapters import RichConsoleSink
from .application.ports import ClientPort, ConsolePort
from .application.use_cases.event_logger import create_event_logger
from .domain import LogMessages


def log(
    client: ClientPort,
    messages: LogMessages | Mapping[str, Any] | None = None,
    *,
    console: ConsolePort | None = None,
) -> Callable[[], None]:
    """Print events of ``client.sync`` and its action log to the console.

    Parameters
    ----------
    client:
        Object exposing the observed sync as ``client.sync``.
    messages:
        :class:`LogMessages` or a mapping with the keys ``state``, ``error``,
        ``add``, ``clean`` and ``color``. Missing keys stay enabled.
    console:
        Sink for the argument lists; defaults to :class:`RichConsoleSink`.

    Returns
    -------
    Callable[[], None]
        Removes every listener added by this call.

    Raises
    ------
    ValueError
        If ``messages`` contains an unknown key.

    Examples
    --------
    >>> from logux_status.adapters import MemoryClient, MemorySync
    >>> client = MemoryClient(MemorySync("client:a"))
    >>> unbind = log(client, {"color": False, "add": False})
    >>> unbind()
    """

    options = LogMessages.from_mapping(messages)
    sink = console if console is not None else RichConsoleSink()
    return create_event_logger(sync=client.sync, console=sink, messages=options)


def summary_info() -> str:
    """Return the metadata banner printed by ``logux-status info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["log", "summary_info"]
