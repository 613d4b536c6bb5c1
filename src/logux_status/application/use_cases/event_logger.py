"""Subscribe to sync and action-log events and print one line per event.

Purpose
-------
Translate the lifecycle of a synchronization client into console lines. The
factory decides once which categories to observe, keeps a single continuity
flag to phrase connection messages, and hands back a teardown callable.

Contents
--------
* :func:`create_event_logger` - build the subscriptions and return teardown.

System Role
-----------
Core use case behind :func:`logux_status.log`; depends only on the ports in
:mod:`logux_status.application.ports` and the pure helpers in
:mod:`logux_status.application.use_cases.formatting`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from logux_status.application.ports.console import ConsolePort
from logux_status.application.ports.sync import (
    ADD_EVENT,
    CLEAN_EVENT,
    CLIENT_ERROR_EVENT,
    CONNECTING_STATE,
    DEBUG_EVENT,
    ERROR_EVENT,
    STATE_EVENT,
    SyncPort,
)
from logux_status.domain import LogMessages, action_type, describe_error, originating_node

from .formatting import emphasize, format_message, plain
from .subscription import Subscription, subscribe

logger = logging.getLogger(__name__)


def create_event_logger(
    *,
    sync: SyncPort,
    console: ConsolePort,
    messages: LogMessages,
) -> Callable[[], None]:
    """Subscribe the enabled categories and return the teardown callable.

    Why
    ---
    Each invocation owns its subscriptions and its continuity flag, so several
    loggers may observe the same client independently.

    Parameters
    ----------
    sync:
        Observed synchronization object.
    console:
        Sink receiving the argument lists. Its style capability is asked once.
    messages:
        Enabled categories and colour preference.

    Returns
    -------
    Callable[[], None]
        Detaches every subscription in the order they were made.
    """

    colors = messages.color and console.supports_styles()
    subscriptions: list[Subscription] = []
    connected_before = False

    def em(fragment: Any) -> str:
        return emphasize(fragment, colors=colors)

    def show(text: str, *payload: Any, error: bool = False) -> None:
        message = format_message(text, *payload, error=error, colors=colors)
        if message.channel == "error":
            console.error(*message.args)
        else:
            console.log(*message.args)

    def show_error(error: Any) -> None:
        description, received = describe_error(error)
        prefix = "server sent " if received else ""
        show(f"{prefix}error: {plain(description)}", error=True)

    def on_state() -> None:
        nonlocal connected_before
        postfix = ""
        if sync.state == CONNECTING_STATE and sync.connection_url:
            postfix = f". {em(sync.local_node_id)} is connecting to {plain(sync.connection_url)}."
        elif sync.connected and not connected_before:
            postfix = f". Client was connected to {em(sync.remote_node_id)}."
            connected_before = True
        if not sync.connected:
            connected_before = False
        show(f"change state to {em(sync.state)}{postfix}")

    def on_debug(kind: str, stack: Any) -> None:
        if kind == "error":
            show(f"server sent error:\n{plain(stack)}", error=True)

    def on_add(action: Any, meta: Mapping[str, Any]) -> None:
        text = f"action {em(action_type(action))} was added"
        node = originating_node(meta)
        if node is not None and node != sync.local_node_id:
            text += f" by {em(node)}"
        show(text, action, meta)

    def on_clean(action: Any, meta: Mapping[str, Any]) -> None:
        show(f"action {em(action_type(action))} was cleaned", action, meta)

    if messages.state:
        subscriptions.append(subscribe(sync, STATE_EVENT, on_state))
    if messages.error:
        subscriptions.append(subscribe(sync, ERROR_EVENT, show_error))
        subscriptions.append(subscribe(sync, CLIENT_ERROR_EVENT, show_error))
        if sync.supports_debug:
            subscriptions.append(subscribe(sync, DEBUG_EVENT, on_debug))
    if messages.add:
        subscriptions.append(subscribe(sync.log, ADD_EVENT, on_add))
    if messages.clean:
        subscriptions.append(subscribe(sync.log, CLEAN_EVENT, on_clean))

    logger.debug(
        "event logger attached",
        extra={"events": [item.event for item in subscriptions], "colors": colors},
    )

    def teardown() -> None:
        for subscription in subscriptions:
            subscription.detach()
        logger.debug("event logger detached", extra={"count": len(subscriptions)})

    return teardown


__all__ = ["create_event_logger"]
