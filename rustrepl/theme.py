"""Syntax-highlighting theme and terminal colour names."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from string import hexdigits

import platformdirs
import toml


class Color(Enum):
    """Named terminal colours."""

    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"
    RESET = "reset"


@dataclass(frozen=True)
class RgbColor:
    """A true-colour value."""

    r: int
    g: int
    b: int


_THEME_COLORS = {color.value: color for color in Color if color is not Color.RESET}


def theme_color_to_term_color(color: str) -> Color | RgbColor | None:
    """Translate a theme colour name or ``#rrggbb`` value; None if invalid."""
    if color.startswith("#"):
        digits = color[1:]
        if len(color) != 7 or not all(c in hexdigits for c in digits):
            return None
        return RgbColor(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    # only lowercase names are accepted
    return _THEME_COLORS.get(color)


def theme_path() -> Path:
    """Location of the theme file in the user's configuration directory."""
    return Path(platformdirs.user_config_dir("irust")) / "theme"


@dataclass
class Theme:
    """Colours used to highlight each kind of token."""

    keyword: str = "magenta"
    keyword2: str = "dark_red"
    function: str = "blue"
    type: str = "cyan"
    number: str = "dark_yellow"
    symbol: str = "red"
    macro: str = "dark_yellow"
    string_literal: str = "yellow"
    character: str = "green"
    lifetime: str = "dark_magenta"
    comment: str = "dark_grey"
    const: str = "dark_green"
    x: str = "white"

    def save(self, path: Path | str | None = None) -> None:
        """Write the theme as TOML."""
        target = Path(path) if path is not None else theme_path()
        target.write_text(toml.dumps(dataclasses.asdict(self)), encoding="utf-8")

    def reset(self) -> None:
        """Restore every colour to its default."""
        for field in dataclasses.fields(self):
            setattr(self, field.name, field.default)

    def set(self, key: str, value: str) -> None:
        """Set one colour, checking both the key and the colour value."""
        if key not in {field.name for field in dataclasses.fields(self)}:
            raise KeyError("key doesn't exist")
        if theme_color_to_term_color(value) is None:
            raise ValueError("Value is incorrect")
        setattr(self, key, value)


def load_theme(path: Path | str | None = None) -> Theme:
    """Read a theme from a TOML file; every key must be present."""
    source = Path(path) if path is not None else theme_path()
    data = toml.loads(source.read_text(encoding="utf-8"))
    values = {}
    for field in dataclasses.fields(Theme):
        if field.name not in data:
            raise ValueError(f"missing field `{field.name}`")
        value = data[field.name]
        if not isinstance(value, str):
            raise ValueError(f"invalid type for field `{field.name}`")
        values[field.name] = value
    return Theme(**values)