import pytest

from rustrepl.history import History
from rustrepl.keymap import Key
from rustrepl.options import Options
from rustrepl.session import (
    EnterOutcome,
    confirm_exit,
    decide_enter,
    history_step,
    incomplete_input,
    input_is_cmd_or_shell,
    record_input,
)


@pytest.fixture
def history(tmp_path):
    return History(path=tmp_path / "history", entries=["let a = 1;", "a + 1", "let b = 2;"])


@pytest.mark.parametrize(
    "buffer",
    ["fn f() {", "let v = vec![1,", "let a =", "x.", "match x {\n Some(v) =>", "foo::"],
)
def test_incomplete_input(buffer):
    assert incomplete_input(buffer) is True


@pytest.mark.parametrize("buffer", ["1 + 1", "fn f() {}", "", "let a = 1;", "x)"])
def test_complete_input(buffer):
    assert incomplete_input(buffer) is False


def test_trailing_whitespace_is_ignored():
    assert incomplete_input("let a =   \n") is True


def test_input_is_cmd_or_shell():
    assert input_is_cmd_or_shell(":help") is True
    assert input_is_cmd_or_shell("::ls") is True
    assert input_is_cmd_or_shell("let a = 1;") is False


def test_decide_enter_new_line_for_incomplete_code():
    assert decide_enter("fn f() {", False) is EnterOutcome.NEW_LINE


def test_decide_enter_forced():
    assert decide_enter("fn f() {", True) is EnterOutcome.EVALUATE


def test_decide_enter_commands_are_evaluated():
    assert decide_enter(":add regex {", False) is EnterOutcome.EVALUATE


def test_decide_enter_complete_code():
    assert decide_enter("1 + 1", False) is EnterOutcome.EVALUATE


def test_record_input_code(history):
    assert record_input(history, Options(), "let c = 3;") is True
    assert history.entries[-1] == "let c = 3;"


def test_record_input_shell_is_skipped_by_default(history):
    before = list(history.entries)
    assert record_input(history, Options(), "::ls") is False
    assert history.entries == before


def test_record_input_irust_command(history):
    assert record_input(history, Options(), ":show") is True
    assert history.entries[-1] == ":show"


def test_record_input_empty(history):
    before = list(history.entries)
    assert record_input(history, Options(), "") is False
    assert history.entries == before


def test_history_step_up_gives_newest_and_locks(history):
    assert history_step(history, Key.UP, "") == "let b = 2;"
    assert history.locked is True


def test_history_step_up_twice(history):
    history_step(history, Key.UP, "")
    assert history_step(history, Key.UP, "let b = 2;") == "a + 1"


def test_history_step_filters_by_input(history):
    assert history_step(history, Key.UP, "a +") == "a + 1"


def test_history_step_down_from_fresh_input_keeps_it(history):
    assert history_step(history, Key.DOWN, "typed") == "typed"


def test_history_step_keeps_buffer_without_match(history):
    assert history_step(history, Key.UP, "nothing like it") == "nothing like it"


def test_history_step_rejects_other_keys(history):
    with pytest.raises(ValueError):
        history_step(history, Key.LEFT, "")


@pytest.mark.parametrize("answer", ["", "y", "Y", "\x04", "  y \n"])
def test_confirm_exit_yes(answer):
    assert confirm_exit(answer) is True


@pytest.mark.parametrize("answer", ["n", "N", "q"])
def test_confirm_exit_no(answer):
    assert confirm_exit(answer) is False