"""Pure helpers turning message text into console-style argument lists.

Why
---
Browser-like consoles style a message through ``%c`` markers in the text and a
parallel list of CSS directives passed as extra arguments. Keeping the
construction of those lists in pure functions lets tests pin the exact
argument shapes without a fake event source.

Contents
--------
* :func:`emphasize` / :func:`plain` - wrap or sanitise interpolated fragments.
* :func:`build_console_args` - prefix, directives, and payload in final order.
* :func:`format_message` - the same list paired with its console channel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

MARKER = "%c"
PREFIX = "Logux:"
PREFIX_STYLE = "color: #ffa200"
EMPHASIS_STYLE = "font-weight: bold"
RESET_STYLE = ""

Channel = Literal["log", "error"]


@dataclass(slots=True, frozen=True)
class ConsoleMessage:
    """Arguments for one console call and the channel receiving them."""

    channel: Channel
    args: tuple[Any, ...]


def plain(value: Any) -> str:
    """Return ``value`` as text that cannot open a marker pair.

    Examples
    --------
    >>> plain("50%c off")
    '50 off'
    """

    return str(value).replace(MARKER, "")


def emphasize(fragment: Any, *, colors: bool = True) -> str:
    """Wrap ``fragment`` in one marker pair, or return it bare without colours.

    Examples
    --------
    >>> emphasize("connecting")
    '%cconnecting%c'
    >>> emphasize("connecting", colors=False)
    'connecting'
    """

    text = plain(fragment)
    if not colors:
        return text
    return f"{MARKER}{text}{MARKER}"


def build_console_args(text: str, *payload: Any, colors: bool = True) -> list[Any]:
    """Return the full argument list for a console call.

    With colours the product prefix gets its own marker pair and every pair
    found in ``text`` gets an emphasis directive, each followed by an empty
    reset directive. Without colours markers are stripped and no directive
    arguments are produced. ``payload`` objects always come last, untouched.
    An unpaired trailing marker is dropped so directives always match pairs.

    Examples
    --------
    >>> build_console_args("error: test")
    ['%cLogux:%c error: test', 'color: #ffa200', '']
    >>> build_console_args("action %cA%c was cleaned", {"type": "A"}, colors=False)
    ['Logux: action A was cleaned', {'type': 'A'}]
    >>> build_console_args("50%c off")
    ['%cLogux:%c 50 off', 'color: #ffa200', '']
    """

    if not colors:
        return [f"{PREFIX} {text.replace(MARKER, '')}", *payload]
    if text.count(MARKER) % 2:
        head, _, tail = text.rpartition(MARKER)
        text = head + tail
    args: list[Any] = [f"{MARKER}{PREFIX}{MARKER} {text}", PREFIX_STYLE, RESET_STYLE]
    for _ in range(text.count(MARKER) // 2):
        args.extend((EMPHASIS_STYLE, RESET_STYLE))
    args.extend(payload)
    return args


def format_message(text: str, *payload: Any, error: bool = False, colors: bool = True) -> ConsoleMessage:
    """Return :func:`build_console_args` output routed to its channel."""

    channel: Channel = "error" if error else "log"
    return ConsoleMessage(channel=channel, args=tuple(build_console_args(text, *payload, colors=colors)))


__all__ = [
    "ConsoleMessage",
    "EMPHASIS_STYLE",
    "MARKER",
    "PREFIX",
    "PREFIX_STYLE",
    "build_console_args",
    "emphasize",
    "format_message",
    "plain",
]
