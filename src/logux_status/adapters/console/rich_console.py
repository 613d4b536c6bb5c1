"""Rich-powered console sink implementing :class:`ConsolePort`.

Purpose
-------
Render browser-style console argument lists (``%c`` markers plus CSS
directives, then payload objects) on a terminal through Rich.

Contents
--------
* :func:`css_to_style` - translate a CSS directive into a Rich style string.
* :class:`RichConsoleSink` - adapter constructed by :func:`logux_status.log`.

System Role
-----------
Default human-facing sink. Colour detection is delegated to Rich, which
already honours ``NO_COLOR``, ``FORCE_COLOR`` and TTY detection.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from rich.console import Console
from rich.pretty import Pretty
from rich.text import Text

from logux_status.application.ports.console import ConsolePort
from logux_status.application.use_cases.formatting import MARKER

_PROPERTY_MAP: Mapping[str, Mapping[str, str]] = {
    "font-weight": {"bold": "bold", "bolder": "bold", "700": "bold"},
    "font-style": {"italic": "italic", "oblique": "italic"},
    "text-decoration": {"underline": "underline", "line-through": "strike"},
}
# Keyword properties Rich can express; ``color`` and ``background`` are handled separately.


def css_to_style(directive: str) -> str:
    """Return the Rich style equivalent of a CSS ``directive``.

    Unknown properties are ignored; an empty directive resets styling.

    Examples
    --------
    >>> css_to_style("color: #ffa200")
    '#ffa200'
    >>> css_to_style("font-weight: bold; background: black")
    'bold on black'
    >>> css_to_style("")
    ''
    """

    parts: list[str] = []
    for declaration in directive.split(";"):
        name, _, value = declaration.partition(":")
        name = name.strip().lower()
        value = value.strip()
        if not name or not value:
            continue
        if name == "color":
            parts.append(value)
        elif name in ("background", "background-color"):
            parts.append(f"on {value}")
        else:
            keyword = _PROPERTY_MAP.get(name, {}).get(value.lower())
            if keyword:
                parts.append(keyword)
    return " ".join(parts)


class RichConsoleSink(ConsolePort):
    """Print console-style argument lists with Rich."""

    def __init__(self, *, console: Console | None = None, error_console: Console | None = None) -> None:
        """Use ``console`` for the log channel and ``error_console`` for errors.

        Without an explicit error console, errors go to a stderr console, or to
        ``console`` itself when only that one is supplied.
        """
        self._console = console if console is not None else Console()
        if error_console is not None:
            self._error_console = error_console
        elif console is not None:
            self._error_console = console
        else:
            self._error_console = Console(stderr=True)

    def log(self, *args: Any) -> None:
        self._print(self._console, args)

    def error(self, *args: Any) -> None:
        self._print(self._error_console, args)

    def supports_styles(self) -> bool:
        return self._console.color_system is not None

    @staticmethod
    def render(args: Sequence[Any]) -> tuple[Text, list[Any]]:
        """Split ``args`` into the styled text and the trailing payload.

        Each marker switches to the next directive; text before the first
        marker is unstyled.

        Examples
        --------
        >>> text, payload = RichConsoleSink.render(["%cLogux:%c hi", "color: red", "", {"a": 1}])
        >>> text.plain, payload
        ('Logux: hi', [{'a': 1}])
        """
        if not args or not isinstance(args[0], str):
            return Text(), list(args)
        segments = args[0].split(MARKER)
        directives = list(args[1 : len(segments)])
        payload = list(args[len(segments) :])
        text = Text(segments[0])
        for segment, directive in zip(segments[1:], directives + [""] * (len(segments) - 1 - len(directives))):
            style = css_to_style(directive) if isinstance(directive, str) else ""
            text.append(segment, style=style or None)
        return text, payload

    @classmethod
    def _print(cls, console: Console, args: Sequence[Any]) -> None:
        text, payload = cls.render(args)
        console.print(text, *(Pretty(item) for item in payload), highlight=False, soft_wrap=True)


__all__ = ["RichConsoleSink", "css_to_style"]
