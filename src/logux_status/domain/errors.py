"""Error descriptors surfaced by the synchronization client."""

from __future__ import annotations

from typing import Any


class SyncError(Exception):
    """Error descriptor delivered through ``error`` and ``client_error`` events.

    Attributes
    ----------
    description:
        Human-readable explanation shown in the console line.
    type:
        Machine-readable error kind (``"wrong-credentials"``, ``"timeout"``, ...).
    received:
        ``True`` when the error was sent by the remote node.
    """

    def __init__(self, description: str, type: str = "error", received: bool = False) -> None:
        super().__init__(description)
        self.description = description
        self.type = type
        self.received = received

    def __repr__(self) -> str:
        return f"SyncError(description={self.description!r}, type={self.type!r}, received={self.received!r})"


def describe_error(error: Any) -> tuple[str, bool]:
    """Return ``(description, received)`` for any error-like object.

    Examples
    --------
    >>> describe_error(SyncError("timeout", received=True))
    ('timeout', True)
    >>> describe_error(RuntimeError("boom"))
    ('boom', False)
    """

    description = getattr(error, "description", None)
    if description is None:
        description = str(error)
    return str(description), bool(getattr(error, "received", False))


__all__ = ["SyncError", "describe_error"]
