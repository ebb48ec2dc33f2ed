import dataclasses

import pytest

from rustrepl.theme import Color, RgbColor, Theme, load_theme, theme_color_to_term_color


def test_named_colors():
    assert theme_color_to_term_color("dark_red") is Color.DARK_RED
    assert theme_color_to_term_color("magenta") is Color.MAGENTA
    assert theme_color_to_term_color("grey") is Color.GREY


def test_names_are_lowercase_only():
    assert theme_color_to_term_color("Red") is None
    assert theme_color_to_term_color("reset") is None
    assert theme_color_to_term_color("purple") is None


def test_hex_color():
    assert theme_color_to_term_color("#ff0000") == RgbColor(255, 0, 0)


@pytest.mark.parametrize("value", ["#fff", "#ff00000", "#gg0000", "#"])
def test_bad_hex(value):
    assert theme_color_to_term_color(value) is None


def test_default_colors_are_valid():
    theme = Theme()
    assert theme.keyword == "magenta"
    assert theme.comment == "dark_grey"
    for field in dataclasses.fields(theme):
        assert theme_color_to_term_color(getattr(theme, field.name)) is not None


def test_set_and_reset():
    theme = Theme()
    theme.set("keyword", "#123456")
    assert theme.keyword == "#123456"
    theme.set("type", "green")
    assert theme.type == "green"
    theme.reset()
    assert theme == Theme()


def test_set_unknown_key():
    with pytest.raises(KeyError):
        Theme().set("nothing", "red")


def test_set_bad_value_leaves_theme_unchanged():
    theme = Theme()
    with pytest.raises(ValueError, match="Value is incorrect"):
        theme.set("keyword", "rainbow")
    assert theme.keyword == "magenta"


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "theme"
    theme = Theme()
    theme.set("const", "blue")
    theme.save(path)
    assert load_theme(path) == theme


def test_load_missing_field(tmp_path):
    path = tmp_path / "theme"
    path.write_text('keyword = "red"\n', encoding="utf-8")
    with pytest.raises(ValueError):
        load_theme(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_theme(tmp_path / "absent")