"""Mapping of key presses to editing actions."""

from __future__ import annotations

from enum import Enum, Flag


class Key(Enum):
    """Keys the editor distinguishes."""

    CHAR = "char"
    ENTER = "enter"
    TAB = "tab"
    BACK_TAB = "back_tab"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    BACKSPACE = "backspace"
    HOME = "home"
    END = "end"
    DELETE = "delete"
    ESC = "esc"


class Modifier(Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


class Action(Enum):
    """What the editor does in response to a key."""

    CHARACTER = "character"
    CTRL_E = "ctrl_e"
    ALT_ENTER = "alt_enter"
    ENTER = "enter"
    TAB = "tab"
    BACK_TAB = "back_tab"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    BACKSPACE = "backspace"
    CTRL_C = "ctrl_c"
    CTRL_D = "ctrl_d"
    CTRL_Z = "ctrl_z"
    CTRL_L = "ctrl_l"
    CTRL_R = "ctrl_r"
    HOME = "home"
    END = "end"
    CTRL_LEFT = "ctrl_left"
    CTRL_RIGHT = "ctrl_right"
    DELETE = "delete"


_ANY_MODIFIER = {
    Key.TAB: Action.TAB,
    Key.BACK_TAB: Action.BACK_TAB,
    Key.UP: Action.UP,
    Key.DOWN: Action.DOWN,
    Key.BACKSPACE: Action.BACKSPACE,
    Key.HOME: Action.HOME,
    Key.END: Action.END,
    Key.DELETE: Action.DELETE,
}

_CONTROL_CHARS = {
    "e": Action.CTRL_E,
    "c": Action.CTRL_C,
    "d": Action.CTRL_D,
    "z": Action.CTRL_Z,
    "l": Action.CTRL_L,
    "r": Action.CTRL_R,
}

_ALT_GR = Modifier.CONTROL | Modifier.ALT


def key_to_action(key: Key, modifiers: Modifier = Modifier.NONE, char: str | None = None) -> Action | None:
    """The action for a key press, or None when the key does nothing."""
    if key is Key.CHAR:
        if char is None:
            raise ValueError("a character key needs its character")
        if modifiers in (Modifier.NONE, Modifier.SHIFT):
            return Action.CHARACTER
        if modifiers == Modifier.CONTROL and char in _CONTROL_CHARS:
            return _CONTROL_CHARS[char]
        # AltGr arrives as control and alt together
        if modifiers & _ALT_GR == _ALT_GR:
            return Action.CHARACTER
        return None
    if key is Key.ENTER:
        return Action.ALT_ENTER if modifiers == Modifier.ALT else Action.ENTER
    if key in (Key.LEFT, Key.RIGHT):
        if modifiers == Modifier.NONE:
            return Action.LEFT if key is Key.LEFT else Action.RIGHT
        if modifiers == Modifier.CONTROL:
            return Action.CTRL_LEFT if key is Key.LEFT else Action.CTRL_RIGHT
        return None
    return _ANY_MODIFIER.get(key)