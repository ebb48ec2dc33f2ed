"""Recognition and argument handling of the REPL's colon commands."""

from __future__ import annotations

import subprocess
from enum import Enum
from pathlib import Path

_TYPE_FOUND_MSG = "expected `()`, found "
_EMPTY_TYPE_MSG = "dev [unoptimized + debuginfo]"
_UNKNOWN_TYPE = "Uknown"
_BOOL_ERROR = "Invalid argument, accepted values are `false` `true`"
_NO_FUNCTION = "No function specified"

# statements that do not need a terminating ';' to be kept as code;
# `loop` is left out because it can produce a value
_STATEMENT_PREFIXES = (
    "fn ",
    "async fn ",
    "enum ",
    "struct ",
    "trait ",
    "impl ",
    "#",
    "pub ",
    "while ",
    "extern ",
)


class CommandKind(Enum):
    """What an entered line asks the REPL to do."""

    HELP = "help"
    RESET = "reset"
    SHOW = "show"
    POP = "pop"
    IRUST = "irust"
    SYNC = "sync"
    SHELL = "shell"
    EDIT = "edit"
    ADD = "add"
    LOAD = "load"
    RELOAD = "reload"
    TYPE = "type"
    DEL = "del"
    CD = "cd"
    COLOR = "color"
    TOOLCHAIN = "toolchain"
    CHECK_STATEMENTS = "check_statements"
    TIME_RELEASE = "time_release"
    TIME = "time"
    BENCH = "bench"
    ASM = "asm"
    EXECUTOR = "executor"
    CODE = "code"


_EXACT_COMMANDS = {
    ":help": CommandKind.HELP,
    ":reset": CommandKind.RESET,
    ":show": CommandKind.SHOW,
    ":pop": CommandKind.POP,
    ":irust": CommandKind.IRUST,
    ":sync": CommandKind.SYNC,
}

# order matters: longer commands sharing a prefix come first
_PREFIX_COMMANDS = (
    ("::", CommandKind.SHELL),
    (":edit", CommandKind.EDIT),
    (":add", CommandKind.ADD),
    (":load", CommandKind.LOAD),
    (":reload", CommandKind.RELOAD),
    (":type", CommandKind.TYPE),
    (":del", CommandKind.DEL),
    (":cd", CommandKind.CD),
    (":color", CommandKind.COLOR),
    (":toolchain", CommandKind.TOOLCHAIN),
    (":check_statements", CommandKind.CHECK_STATEMENTS),
    (":time_release", CommandKind.TIME_RELEASE),
    (":time", CommandKind.TIME),
    (":bench", CommandKind.BENCH),
    (":asm", CommandKind.ASM),
    (":executor", CommandKind.EXECUTOR),
)


def classify_command(buffer: str) -> CommandKind:
    """Decide which command an entered line is; plain code otherwise."""
    exact = _EXACT_COMMANDS.get(buffer)
    if exact is not None:
        return exact
    for prefix, kind in _PREFIX_COMMANDS:
        if buffer.startswith(prefix):
            return kind
    return CommandKind.CODE


def is_statement(buffer: str, auto_insert_semicolon: bool) -> bool:
    """Whether code is kept as a statement rather than evaluated as an expression."""
    trimmed = buffer.strip()
    if trimmed.endswith(";"):
        return True
    return auto_insert_semicolon and trimmed.startswith(_STATEMENT_PREFIXES)


def extract_type(raw_output: str) -> str:
    """Read the type of an expression from the compiler's complaint about it."""
    if _TYPE_FOUND_MSG in raw_output:
        # when two lines mention it, the later one is more detailed
        line = next(line for line in reversed(raw_output.splitlines()) if "found" in line)
        return line.rsplit("found ", 1)[-1]
    if _EMPTY_TYPE_MSG in raw_output:
        return "()"
    return _UNKNOWN_TYPE


def timing_code(buffer: str, pattern: str) -> str:
    """Code that runs what follows pattern in buffer and prints how long it took."""
    _, found, function = buffer.partition(pattern)
    if not found or not function:
        raise ValueError(_NO_FUNCTION)
    return (
        "use std::time::Instant;\n"
        "        let now = Instant::now();\n"
        f"        {function};\n"
        '        println!("{:?}", now.elapsed());\n'
        "        "
    )


def command_argument(buffer: str) -> str | None:
    """The first whitespace-separated argument after the command name."""
    parts = buffer.split()
    return parts[1] if len(parts) > 1 else None


def parse_bool_argument(buffer: str) -> bool:
    """The command's argument as a boolean; only ``true`` and ``false`` are accepted."""
    argument = command_argument(buffer)
    if argument == "true":
        return True
    if argument == "false":
        return False
    raise ValueError(_BOOL_ERROR)


def resolve_cd_target(
    buffer: str, cwd: Path | str, previous: Path | str, home: Path | str | None
) -> Path:
    """Directory a ``:cd`` line moves to.

    No argument means home (staying put when there is none), ``-`` means the
    previous directory, anything else is taken relative to cwd.
    """
    target = "".join(buffer.split(":cd")[1:]).strip()
    if target == "":
        return Path(home) if home is not None else Path(cwd)
    if target == "-":
        return Path(previous)
    return Path(cwd) / target


def replace_marker(buffer: str, marker: str, last_output: str | None) -> str:
    """Substitute the last output for every marker in buffer, when there is one."""
    if last_output is None:
        return buffer
    return buffer.replace(marker, last_output)


def run_shell(buffer: str) -> str:
    """Run a ``::`` shell line and return its stdout then stderr, trimmed."""
    parts = buffer[2:].split()
    if not parts:
        raise FileNotFoundError("no command given")
    completed = subprocess.run(parts, capture_output=True)
    stdout = completed.stdout.decode("utf-8", errors="replace")
    stderr = completed.stderr.decode("utf-8", errors="replace")
    return (stdout + stderr).strip()