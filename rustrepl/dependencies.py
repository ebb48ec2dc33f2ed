"""Checks for required and optional external tools, with guided installation."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from typing import Callable

from .options import Options

REQUIRED_DEPS = ("cargo",)

_RED = "31"
_GREEN = "32"
_YELLOW = "33"
_MAGENTA = "35"
_DARK_BLUE = "34"


def _paint(text: str, code: str) -> str:
    return f"\x1b[{code}m{text}\x1b[0m"


def _debug_list(cmd: list[str]) -> str:
    return "[" + ", ".join(f'"{part}"' for part in cmd) + "]"


def _run(cmd: list[str]) -> int:
    print(_paint(f"Running: {_debug_list(cmd)}", _MAGENTA))
    return subprocess.run(cmd).returncode


def dep_installed(name: str) -> bool:
    """Whether a command can be started at all."""
    try:
        subprocess.run(
            [name, "-h"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=30,
        )
    except FileNotFoundError:
        return False
    except (OSError, subprocess.TimeoutExpired):
        return True
    return True


def check_required_deps() -> bool:
    """Report the first missing required tool on stderr; False if any is missing."""
    for dep in REQUIRED_DEPS:
        if not dep_installed(dep):
            print(
                f"{dep} is not insalled!\n{dep} is required for IRust to work.",
                file=sys.stderr,
            )
            return False
    return True


@dataclass(frozen=True)
class Dependency:
    """An optional tool, the feature it enables and how to install it."""

    name: str
    cmd: str
    function: str
    install: Callable[[], list[int]]


def _require_rustup(message: str) -> None:
    if not dep_installed("rustup"):
        print(_paint(message, _RED))
        raise OSError("rustup is not installed")


def _install_racer() -> list[int]:
    _require_rustup(
        "rustup is not installed.\nrustup is required to install and configure racer"
    )
    return [
        _run(["rustup", "install", "nightly"]),
        _run(["cargo", "+nightly", "install", "racer"]),
        _run(["rustup", "component", "add", "rust-src"]),
    ]


def _install_rustfmt() -> list[int]:
    _require_rustup("rustup is not installed.\nrustup is required to install rustfmt")
    return [_run(["rustup", "component", "add", "rustfmt"])]


def _install_cargo_edit() -> list[int]:
    return [_run(["cargo", "install", "cargo-edit"])]


def _install_cargo_asm() -> list[int]:
    return [_run(["cargo", "install", "cargo-asm"])]


def optional_dependencies() -> list[Dependency]:
    """Tools that enable extra features, in the order they are offered."""
    return [
        Dependency("racer", "racer", "auto_completion", _install_racer),
        Dependency("rustfmt", "rustfmt", "beautifying repl code", _install_rustfmt),
        Dependency("cargo-edit", "cargo-add", "adding depedencies", _install_cargo_edit),
        Dependency("cargo-asm", "cargo-asm", "viewing functions assembly", _install_cargo_asm),
    ]


def _read_answer() -> str:
    return sys.stdin.readline()


def warn_about_opt_deps(options: Options, ask: Callable[[], str] | None = None) -> bool:
    """On the first run, offer to install each missing optional tool.

    ``ask`` returns the user's answer to each question. Returns whether
    anything was installed.
    """
    if not options.first_irust_run:
        return False
    read_answer = ask if ask is not None else _read_answer

    print(
        _paint(
            "Hi and Welcome to IRust!\n"
            "This is a one time message\n"
            "IRust will check now for optional dependencies and offer to install them\n",
            _DARK_BLUE,
        )
    )

    installed_something = False
    for dep in optional_dependencies():
        if dep_installed(dep.cmd):
            continue
        print()
        print(
            _paint(
                f"{dep.name} is not installed, it's required for {dep.function}\n"
                "Do you want IRust to install it? [Y/n]: ",
                _YELLOW,
            )
        )
        answer = read_answer().strip()
        if answer not in ("", "y", "Y"):
            continue
        try:
            statuses = dep.install()
        except OSError:
            statuses = None
        if statuses is not None and all(code == 0 for code in statuses):
            print(_paint(f"{dep.name} sucessfully installed!\n", _GREEN))
            installed_something = True
        else:
            print(_paint(f"error while installing {dep.name}", _RED))

    options.first_irust_run = False

    if installed_something:
        print(_paint("You might need to reload the shell inorder to update $PATH", _YELLOW))
    print(_paint("Everthing is set!", _GREEN))
    return installed_something