import pytest

from rustrepl.keymap import Action, Key, Modifier, key_to_action


@pytest.mark.parametrize("mods", [Modifier.NONE, Modifier.SHIFT])
def test_plain_characters(mods):
    assert key_to_action(Key.CHAR, mods, "a") is Action.CHARACTER


@pytest.mark.parametrize(
    "char,action",
    [
        ("e", Action.CTRL_E),
        ("c", Action.CTRL_C),
        ("d", Action.CTRL_D),
        ("z", Action.CTRL_Z),
        ("l", Action.CTRL_L),
        ("r", Action.CTRL_R),
    ],
)
def test_control_characters(char, action):
    assert key_to_action(Key.CHAR, Modifier.CONTROL, char) is action


def test_unknown_control_character():
    assert key_to_action(Key.CHAR, Modifier.CONTROL, "q") is None


def test_alt_gr_character():
    assert key_to_action(Key.CHAR, Modifier.CONTROL | Modifier.ALT, "@") is Action.CHARACTER


def test_alt_only_character_ignored():
    assert key_to_action(Key.CHAR, Modifier.ALT, "x") is None


def test_char_requires_character():
    with pytest.raises(ValueError):
        key_to_action(Key.CHAR, Modifier.NONE, None)


def test_enter_variants():
    assert key_to_action(Key.ENTER, Modifier.ALT) is Action.ALT_ENTER
    assert key_to_action(Key.ENTER, Modifier.NONE) is Action.ENTER
    assert key_to_action(Key.ENTER, Modifier.SHIFT) is Action.ENTER


def test_arrows():
    assert key_to_action(Key.LEFT) is Action.LEFT
    assert key_to_action(Key.RIGHT) is Action.RIGHT
    assert key_to_action(Key.LEFT, Modifier.CONTROL) is Action.CTRL_LEFT
    assert key_to_action(Key.RIGHT, Modifier.CONTROL) is Action.CTRL_RIGHT
    assert key_to_action(Key.LEFT, Modifier.SHIFT) is None


@pytest.mark.parametrize(
    "key,action",
    [
        (Key.TAB, Action.TAB),
        (Key.BACK_TAB, Action.BACK_TAB),
        (Key.UP, Action.UP),
        (Key.DOWN, Action.DOWN),
        (Key.BACKSPACE, Action.BACKSPACE),
        (Key.HOME, Action.HOME),
        (Key.END, Action.END),
        (Key.DELETE, Action.DELETE),
    ],
)
@pytest.mark.parametrize("mods", [Modifier.NONE, Modifier.CONTROL, Modifier.SHIFT])
def test_keys_with_any_modifier(key, action, mods):
    assert key_to_action(key, mods) is action


def test_escape_does_nothing():
    assert key_to_action(Key.ESC) is None