from __future__ import annotations

from logux_status.adapters import Emitter
from logux_status.application.use_cases.subscription import Subscription, subscribe


def test_subscribe_registers_callback_and_detach_removes_it() -> None:
    emitter = Emitter()
    seen: list[str] = []

    subscription = subscribe(emitter, "state", seen.append)
    emitter.emit("state", "connecting")
    subscription.detach()
    emitter.emit("state", "synchronized")

    assert isinstance(subscription, Subscription)
    assert subscription.event == "state"
    assert seen == ["connecting"]


def test_subscription_calls_the_unbind_returned_by_the_source() -> None:
    calls: list[str] = []

    class Source:
        def on(self, event, callback):
            calls.append(f"on:{event}")
            return lambda: calls.append(f"off:{event}")

    subscription = subscribe(Source(), "add", print)
    subscription.detach()

    assert calls == ["on:add", "off:add"]
