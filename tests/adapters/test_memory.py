from __future__ import annotations

from logux_status.adapters import MemoryActionLog, MemoryClient, MemorySync
from logux_status.application.ports.sync import ActionLogPort, SyncPort


def _record(log: MemoryActionLog) -> list[tuple[str, object, dict]]:
    events: list[tuple[str, object, dict]] = []
    log.on("add", lambda action, meta: events.append(("add", action, dict(meta))))
    log.on("clean", lambda action, meta: events.append(("clean", action, dict(meta))))
    return events


def test_add_fills_metadata_and_keeps_actions_with_reasons() -> None:
    log = MemoryActionLog("test1")
    events = _record(log)

    meta = log.add({"type": "A"}, {"reasons": ["test"]})

    assert meta == {"id": "1 test1 0", "time": 1, "reasons": ["test"], "added": 1}
    assert events == [("add", {"type": "A"}, meta)]
    assert log.entries() == [({"type": "A"}, meta)]


def test_add_without_reasons_cleans_immediately() -> None:
    log = MemoryActionLog("test1")
    events = _record(log)

    log.add({"type": "A"})

    assert [name for name, _, _ in events] == ["add", "clean"]
    assert log.entries() == []


def test_add_keeps_caller_supplied_id() -> None:
    log = MemoryActionLog("client")
    meta = log.add({"type": "B"}, {"id": "5 server 0", "reasons": ["sync"]})
    assert meta["id"] == "5 server 0"
    assert meta["added"] == 1


def test_remove_reason_cleans_only_actions_left_without_reasons() -> None:
    log = MemoryActionLog("test1")
    log.add({"type": "A"}, {"reasons": ["test"]})
    log.add({"type": "B"}, {"reasons": ["test", "keep"]})
    log.add({"type": "C"}, {"reasons": ["other"]})
    events = _record(log)

    cleaned = log.remove_reason("test")

    assert cleaned == 1
    assert events == [("clean", {"type": "A"}, {"id": "1 test1 0", "time": 1, "reasons": [], "added": 1})]
    assert [action["type"] for action, _ in log.entries()] == ["B", "C"]
    assert log.entries()[0][1]["reasons"] == ["keep"]


def test_sync_set_state_updates_field_and_emits() -> None:
    sync = MemorySync("test1", connection_url="ws://ya.ru")
    states: list[str] = []
    sync.on("state", lambda: states.append(sync.state))

    sync.set_state("connecting")

    assert states == ["connecting"]
    assert sync.connected is False
    assert sync.log.node_id == "test1"


def test_client_exposes_sync() -> None:
    sync = MemorySync("test1")
    assert MemoryClient(sync).sync is sync


def test_memory_sync_declares_the_sync_port_surface() -> None:
    sync = MemorySync("test1")
    assert isinstance(sync, SyncPort)
    assert isinstance(sync.log, ActionLogPort)
    assert sync.supports_debug is True
