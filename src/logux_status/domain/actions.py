"""Helpers reading the parts of actions and metadata the console lines need."""

from __future__ import annotations

from typing import Any, Mapping


def action_type(action: Any) -> str:
    """Return the ``type`` of an action mapping or object.

    Examples
    --------
    >>> action_type({"type": "user/rename"})
    'user/rename'
    """

    if isinstance(action, Mapping):
        return str(action.get("type", ""))
    return str(getattr(action, "type", ""))


def originating_node(meta: Mapping[str, Any] | None) -> str | None:
    """Return the node id that created the action described by ``meta``.

    Action ids come either as ``"<time> <node> <seq>"`` strings or as
    ``[time, node, seq]`` sequences.

    Examples
    --------
    >>> originating_node({"id": "1 client:a 0"})
    'client:a'
    >>> originating_node({"id": [1, "test1", 0]})
    'test1'
    >>> originating_node({}) is None
    True
    """

    if not meta:
        return None
    action_id = meta.get("id")
    if isinstance(action_id, str):
        parts = action_id.split(" ")
        return parts[1] if len(parts) > 1 else None
    if isinstance(action_id, (list, tuple)) and len(action_id) > 1:
        return str(action_id[1])
    return None


__all__ = ["action_type", "originating_node"]
