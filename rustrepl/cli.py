"""Command-line entry point and the line-based interactive session."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path

from .art import DEFAULT_WELCOME, ferris, welcome_message
from .commands import (
    CommandKind,
    classify_command,
    command_argument,
    parse_bool_argument,
    resolve_cd_target,
    run_shell,
)
from .dependencies import check_required_deps, warn_about_opt_deps
from .format import PrinterItem, PrintQueue
from .history import History
from .options import Options, config_path
from .scripts import GlobalVariables
from .session import EnterOutcome, confirm_exit, decide_enter, record_input
from .theme import Color, Theme, load_theme

VERSION = "1.9.0"

_HELP = (
    "IRust: Cross Platform Rust REPL\n"
    "        version: {version}\n\n"
    "        config file is in {path}\n\n"
    "        --help => shows this message\n"
    "        --reset-config => reset IRust configuration to default"
)

_SUCCESS = "Ok!"

_ANSI = {
    Color.BLACK: "30",
    Color.DARK_GREY: "90",
    Color.RED: "91",
    Color.DARK_RED: "31",
    Color.GREEN: "92",
    Color.DARK_GREEN: "32",
    Color.YELLOW: "93",
    Color.DARK_YELLOW: "33",
    Color.BLUE: "94",
    Color.DARK_BLUE: "34",
    Color.MAGENTA: "95",
    Color.DARK_MAGENTA: "35",
    Color.CYAN: "96",
    Color.DARK_CYAN: "36",
    Color.WHITE: "97",
    Color.GREY: "37",
}


def handle_args(args: list[str], options: Options) -> bool:
    """Act on the command-line arguments; True when the program should stop."""
    if not args:
        return False
    first = args[0]
    if first in ("-h", "--help"):
        print(_HELP.format(version=VERSION, path=config_path()))
        return True
    if first in ("-v", "--version"):
        print(VERSION)
        return True
    if first == "--reset-config":
        options.reset()
    else:
        print(f"Unknown argument: {first}", file=sys.stderr)
    return False


def _paint(text: str, color: Color | None) -> str:
    code = _ANSI.get(color) if color is not None else None
    return f"\x1b[{code}m{text}\x1b[0m" if code else text


def _render(queue: PrintQueue) -> str:
    return "".join(_paint(item.text, item.color) for item in queue)


def _queue(text: str, color: Color) -> PrintQueue:
    queue = PrintQueue()
    queue.push(PrinterItem(text, color))
    queue.add_new_line(1)
    return queue


def _success() -> PrintQueue:
    return _queue(_SUCCESS, Color.BLUE)


def _error_message(error: Exception) -> str:
    if isinstance(error, KeyError) and error.args:
        return str(error.args[0])
    return str(error)


class _BackendUnavailable(Exception):
    """A command that needs the compilation backend was entered."""


class _Session:
    """Reads lines, runs the commands it can and prints the results."""

    def __init__(self, options: Options) -> None:
        self.options = options
        try:
            self.theme = load_theme()
        except (OSError, ValueError):
            self.theme = Theme()
        try:
            self.history = History.load()
        except OSError:
            self.history = History(path=Path(os.devnull))
        self.globals = GlobalVariables()
        self.globals.prompt_len = len(options.input_prompt)

    def welcome(self) -> None:
        width = shutil.get_terminal_size().columns
        try:
            message = welcome_message(self.options.welcome_msg, width)
        except ValueError:
            message = self.options.welcome_msg or DEFAULT_WELCOME
        sys.stdout.write(_paint(message, self.options.welcome_color) + "\n\n")

    def run(self) -> None:
        self.welcome()
        while True:
            try:
                buffer = self._read_entry()
            except KeyboardInterrupt:
                sys.stdout.write("\n")
                continue
            except EOFError:
                if self._ask_exit():
                    break
                continue
            output = self.evaluate(buffer)
            if len(output):
                sys.stdout.write(_render(output))
                self.globals.operation_number += 1
            sys.stdout.flush()

    def _read_entry(self) -> str:
        prompt = self.options.input_prompt
        lines = [input(_paint(prompt, self.options.input_color))]
        while decide_enter("\n".join(lines), False) is EnterOutcome.NEW_LINE:
            try:
                lines.append(input(" " * len(prompt)))
            except EOFError:
                break
        return "\n".join(lines)

    def _ask_exit(self) -> bool:
        sys.stdout.write("\n")
        try:
            answer = input(_paint("Do you really want to exit ([y]/n)? ", Color.GREY))
        except EOFError:
            return True
        except KeyboardInterrupt:
            return False
        leave = confirm_exit(answer)
        if not leave:
            sys.stdout.write("\n")
        return leave

    def evaluate(self, buffer: str) -> PrintQueue:
        record_input(self.history, self.options, buffer)
        try:
            return self._parse(buffer)
        except (_BackendUnavailable, OSError, ValueError, KeyError, RuntimeError) as error:
            return _queue(_error_message(error), self.options.err_color)

    def _parse(self, buffer: str) -> PrintQueue:
        kind = classify_command(buffer)
        if kind is CommandKind.CODE and not buffer.strip():
            return PrintQueue()
        if kind is CommandKind.IRUST:
            return _queue(ferris(), Color.RED)
        if kind is CommandKind.SHELL:
            return _queue(run_shell(buffer), self.options.shell_color)
        if kind is CommandKind.CD:
            return self._cd(buffer)
        if kind is CommandKind.COLOR:
            return self._color(buffer)
        if kind is CommandKind.CHECK_STATEMENTS:
            self.options.check_statements = parse_bool_argument(buffer)
            return _success()
        if kind is CommandKind.TOOLCHAIN and command_argument(buffer) is None:
            return _queue(self.options.toolchain, Color.BLUE)
        if kind is CommandKind.EXECUTOR and command_argument(buffer) is None:
            return _queue(self.options.executor, Color.BLUE)
        raise _BackendUnavailable(
            f"`{kind.value}` needs the compilation backend, which is not available"
        )

    def _cd(self, buffer: str) -> PrintQueue:
        try:
            home: Path | None = Path.home()
        except RuntimeError:
            home = None
        target = resolve_cd_target(
            buffer, Path.cwd(), self.globals.previous_working_dir, home
        )
        os.chdir(target)
        cwd = Path.cwd()
        self.globals.update_cwd(cwd)
        return _queue(str(cwd), self.options.ok_color)

    def _color(self, buffer: str) -> PrintQueue:
        args = buffer.split()[1:]
        if args[:1] == ["reset"]:
            self.theme.reset()
            return _success()
        if not args:
            raise ValueError("Key not specified")
        if len(args) < 2:
            raise ValueError("Value not specified")
        self.theme.set(args[0], args[1])
        return _success()

    def close(self) -> None:
        """Persist history, options and theme; failures are ignored."""
        for save in (self.history.save, self.options.save, self.theme.save):
            try:
                save()
            except OSError:
                pass
        sys.stdout.write("\n")
        sys.stdout.flush()


def _load_options() -> Options:
    try:
        return Options.load()
    except (OSError, ValueError):
        return Options()


def main(argv: list[str] | None = None) -> int:
    """Run the program; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    options = _load_options()

    if handle_args(args, options):
        return 0
    if not check_required_deps():
        return 1
    warn_about_opt_deps(options)

    session = _Session(options)
    failure: Exception | None = None
    try:
        session.run()
    except OSError as error:
        failure = error
    finally:
        session.close()

    if failure is not None:
        print(_paint(f"\r\nIRust exited with error: {failure}", Color.RED), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())