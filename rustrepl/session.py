"""Decisions taken while editing and submitting input."""

from __future__ import annotations

from enum import Enum

from .history import History
from .keymap import Key
from .options import Options

_OPENING = "([{"
_CLOSING = {")": "(", "]": "[", "}": "{"}
_CONTINUATION_ENDINGS = (":", ".", "=")
_CTRL_D = "\x04"


class EnterOutcome(Enum):
    """What pressing Enter does with the current input."""

    NEW_LINE = "new_line"
    EVALUATE = "evaluate"


def _unmatched_brackets(text: str) -> bool:
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif char in _CLOSING:
            if not stack or stack[-1] != _CLOSING[char]:
                # a stray closer cannot be fixed by typing more
                return False
            stack.pop()
    return bool(stack)


def incomplete_input(buffer: str) -> bool:
    """Whether the input obviously continues on another line."""
    return _unmatched_brackets(buffer) or buffer.rstrip().endswith(_CONTINUATION_ENDINGS)


def input_is_cmd_or_shell(buffer: str) -> bool:
    """Whether the input is a REPL command or a shell line."""
    return buffer.startswith(":")


def decide_enter(buffer: str, force_eval: bool) -> EnterOutcome:
    """Either start a new input line or evaluate what was typed."""
    if not force_eval and not input_is_cmd_or_shell(buffer) and incomplete_input(buffer):
        return EnterOutcome.NEW_LINE
    return EnterOutcome.EVALUATE


def record_input(history: History, options: Options, buffer: str) -> bool:
    """Add an entered line to the history when the options allow it."""
    if options.should_push_to_history(buffer):
        history.push(buffer)
        return True
    return False


def history_step(history: History, direction: Key, buffer: str) -> str:
    """Move through the history with the up or down key; returns the new input."""
    if direction is Key.UP:
        found = history.up(buffer)
    elif direction is Key.DOWN:
        found = history.down(buffer)
    else:
        raise ValueError(f"history can only move up or down, not {direction!r}")
    history.lock()
    return found if found is not None else buffer


def confirm_exit(answer: str) -> bool:
    """Whether an answer to the exit question means yes; yes is the default."""
    answer = answer.strip()
    if answer in ("", _CTRL_D):
        return True
    return answer[:1] in ("y", "Y")