"""Banner text, the mascot drawing and the progress spinner frames."""

from __future__ import annotations

DEFAULT_WELCOME = "Welcome to IRust"

_FERRIS_LINES = (
    "     _~^~^~_",
    " \\) /  o o  \\ (/",
    "   '_   ¬   _'",
    "   / '-----' \\",
    " " * 21,
)

_SPINNER = ("\\", "|", "/", "-", "\\", "|", "/", "-")


def fit_msg(msg: str, width: int) -> str:
    """Centre msg between runs of dashes filling a line of the given width."""
    # the width taken by the message is its encoded byte length
    slash_num = width - len(msg.encode("utf-8"))
    if slash_num < 0:
        raise ValueError("message is wider than the terminal")
    slash = "-" * (slash_num // 2)
    return f"{slash}{msg}{slash}"


def ferris() -> str:
    """The mascot drawing, one newline-terminated line per row."""
    return "".join(line + "\n" for line in _FERRIS_LINES)


def welcome_message(msg: str, width: int) -> str:
    """The welcome banner, using the default text when msg is empty."""
    return fit_msg(msg or DEFAULT_WELCOME, width)


def spinner_frames() -> tuple[str, ...]:
    """Frames drawn in turn while waiting for a dependency command."""
    return _SPINNER