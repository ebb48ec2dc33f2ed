"""User configuration stored as TOML."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import platformdirs
import toml

from .theme import Color


def config_path() -> Path:
    """Location of the configuration file, creating its directory if needed."""
    config_dir = Path(platformdirs.user_config_dir("irust"))
    try:
        config_dir.mkdir(parents=True)
    except OSError:
        pass
    return config_dir / "config"


@dataclass
class Options:
    """All configurable settings with their defaults."""

    # history
    add_irust_cmd_to_history: bool = True
    add_shell_cmd_to_history: bool = False
    # colours
    ok_color: Color = Color.BLUE
    eval_color: Color = Color.WHITE
    irust_color: Color = Color.DARK_BLUE
    irust_warn_color: Color = Color.CYAN
    out_color: Color = Color.RED
    shell_color: Color = Color.DARK_YELLOW
    err_color: Color = Color.DARK_RED
    input_color: Color = Color.YELLOW
    insert_color: Color = Color.WHITE
    # welcome
    welcome_msg: str = ""
    welcome_color: Color = Color.DARK_BLUE
    # racer
    racer_inline_suggestion_color: Color = Color.CYAN
    racer_suggestions_table_color: Color = Color.GREEN
    racer_selected_suggestion_color: Color = Color.DARK_RED
    racer_max_suggestions: int = 5
    # other
    first_irust_run: bool = True
    enable_racer: bool = True
    toolchain: str = "stable"
    check_statements: bool = True
    auto_insert_semicolon: bool = True
    replace_marker: str = "$out"
    replace_output_with_marker: bool = False
    input_prompt: str = "In: "
    output_prompt: str = "Out: "
    activate_scripting: bool = False
    activate_scripting2: bool = False
    executor: str = "sync"

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Options":
        """Read options from a TOML file; every field must be present."""
        source = Path(path) if path is not None else config_path()
        data = toml.loads(source.read_text(encoding="utf-8"))
        return cls(**{field.name: _parse_field(field, data) for field in dataclasses.fields(cls)})

    def save(self, path: Path | str | None = None) -> None:
        """Write options as TOML."""
        target = Path(path) if path is not None else config_path()
        data = {
            field.name: _dump_value(getattr(self, field.name))
            for field in dataclasses.fields(self)
        }
        target.write_text(toml.dumps(data), encoding="utf-8")

    def reset(self) -> None:
        """Restore every option to its default."""
        for field in dataclasses.fields(self):
            setattr(self, field.name, field.default)

    def should_push_to_history(self, buffer: str) -> bool:
        """Whether an entered line belongs in the history."""
        if not buffer:
            return False
        if len(buffer) == 1:
            return buffer != ":"
        irust_cmd = buffer[0] == ":" and buffer[1] != ":"
        shell_cmd = buffer[0] == ":" and buffer[1] == ":"
        return (
            (irust_cmd and self.add_irust_cmd_to_history)
            or (shell_cmd and self.add_shell_cmd_to_history)
            or (not irust_cmd and not shell_cmd)
        )


def _dump_value(value: Any) -> Any:
    return value.value if isinstance(value, Color) else value


def _parse_field(field: dataclasses.Field, data: dict) -> Any:
    if field.name not in data:
        raise ValueError(f"missing field `{field.name}`")
    value = data[field.name]
    default = field.default
    if isinstance(default, Color):
        try:
            return Color(value)
        except ValueError:
            raise ValueError(f"invalid colour for field `{field.name}`: {value!r}") from None
    if type(value) is not type(default):
        raise ValueError(f"invalid type for field `{field.name}`")
    return value