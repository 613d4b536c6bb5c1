"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "logux_status"
title = "Print synchronization client events to the console"
version = "0.1.0"
homepage = "https://github.com/logux/logux-status"
author = "logux-status contributors"
author_email = "logux-status@users.noreply.github.com"
shell_command = "logux-status"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner line by line through ``writer`` (defaults to ``print``)."""

    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is None:
        print(text, end="")
    else:
        writer(text)
