"""Domain values describing sync events and message preferences."""

from __future__ import annotations

from .actions import action_type, originating_node
from .errors import SyncError, describe_error
from .messages import LogMessages

__all__ = [
    "LogMessages",
    "SyncError",
    "action_type",
    "describe_error",
    "originating_node",
]
