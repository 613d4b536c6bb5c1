from __future__ import annotations

import pytest

from logux_status.application.use_cases.formatting import (
    EMPHASIS_STYLE,
    PREFIX_STYLE,
    ConsoleMessage,
    build_console_args,
    emphasize,
    format_message,
    plain,
)


def test_emphasize_wraps_fragment_in_one_marker_pair() -> None:
    assert emphasize("test1") == "%ctest1%c"


def test_emphasize_without_colors_returns_plain_text() -> None:
    assert emphasize("test1", colors=False) == "test1"


def test_emphasize_strips_markers_inside_fragment() -> None:
    assert emphasize("a%cb") == "%cab%c"
    assert plain("50%c") == "50"


def test_colored_args_prefix_with_product_name() -> None:
    assert build_console_args("error: test") == ["%cLogux:%c error: test", PREFIX_STYLE, ""]


def test_colored_args_add_one_directive_pair_per_marker_pair() -> None:
    text = f"change state to {emphasize('connecting')}. {emphasize('test1')} is connecting to ws://ya.ru."
    assert build_console_args(text) == [
        "%cLogux:%c change state to %cconnecting%c. %ctest1%c is connecting to ws://ya.ru.",
        "color: #ffa200",
        "",
        "font-weight: bold",
        "",
        "font-weight: bold",
        "",
    ]


@pytest.mark.parametrize("pairs", [0, 1, 3])
def test_directive_pairs_match_marker_pairs_plus_prefix(pairs: int) -> None:
    text = " ".join(emphasize(f"part{index}") for index in range(pairs))
    args = build_console_args(text)
    directives = args[1:]
    assert len(directives) == 2 * (pairs + 1)
    assert directives.count(EMPHASIS_STYLE) == pairs


def test_payload_is_appended_last_and_untouched() -> None:
    action = {"type": "A"}
    meta = {"id": "1 test1 0", "reasons": ["test"]}
    args = build_console_args(f"action {emphasize('A')} was added", action, meta)
    assert args[-2] is action
    assert args[-1] is meta
    assert args[1:-2] == [PREFIX_STYLE, "", EMPHASIS_STYLE, ""]


def test_plain_args_strip_markers_and_emit_no_directives() -> None:
    action = {"type": "A"}
    args = build_console_args("action %cA%c was cleaned", action, colors=False)
    assert args == ["Logux: action A was cleaned", action]


def test_format_message_routes_error_lines() -> None:
    message = format_message("error: test", error=True, colors=False)
    assert message == ConsoleMessage(channel="error", args=("Logux: error: test",))
    assert format_message("change state to connecting").channel == "log"


def test_unpaired_trailing_marker_is_dropped() -> None:
    text = f"action {emphasize('A')} costs 50%c"
    args = build_console_args(text)
    assert args[0] == "%cLogux:%c action %cA%c costs 50"
    assert args[1:] == [PREFIX_STYLE, "", EMPHASIS_STYLE, ""]
