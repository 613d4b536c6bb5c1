from __future__ import annotations

import pytest

from logux_status.domain import LogMessages


def test_log_messages_enable_everything_by_default() -> None:
    messages = LogMessages()
    assert messages.to_dict() == {"state": True, "error": True, "add": True, "clean": True, "color": True}


def test_from_mapping_keeps_missing_keys_enabled() -> None:
    messages = LogMessages.from_mapping({"add": False, "color": 0})
    assert messages.add is False
    assert messages.color is False
    assert messages.state is True
    assert messages.clean is True


def test_from_mapping_passes_instances_through() -> None:
    messages = LogMessages(clean=False)
    assert LogMessages.from_mapping(messages) is messages


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="colour"):
        LogMessages.from_mapping({"colour": False})


def test_replace_returns_modified_copy() -> None:
    messages = LogMessages()
    changed = messages.replace(error=False)
    assert changed.error is False
    assert messages.error is True
