"""Rendering of the bundled markdown help text into a print queue."""

from __future__ import annotations

from typing import Iterator

from .format import PrinterItem, PrintQueue
from .theme import Color

_SYMBOLS = frozenset("=>()-|")


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class _Peekable:
    """Character stream with one character of lookahead."""

    def __init__(self, text: str) -> None:
        self._chars: Iterator[str] = iter(text)
        self._ahead: str | None = next(self._chars, None)

    def peek(self) -> str | None:
        return self._ahead

    def next(self) -> str | None:
        current = self._ahead
        if current is not None:
            self._ahead = next(self._chars, None)
        return current


def _emphasis(line: _Peekable) -> str:
    """Consume an emphasised span that started with one star."""
    star = "*"
    pending: int | None = None
    post_star_count = 0
    while line.peek() is not None:
        c = line.next()
        if pending is None and c != "*":
            pending = len(star)
        star += c
        if pending is not None:
            if c == "*":
                post_star_count += 1
                if pending == post_star_count:
                    break
            else:
                post_star_count = max(post_star_count - 1, 0)
    return star


def _quoted(line: _Peekable) -> str:
    """Consume an inline code span that started with a backtick."""
    quoted = "`"
    while line.peek() is not None and line.peek() != "`":
        quoted += line.next()
    if line.peek() is not None:
        quoted += line.next()
    return quoted


def _render_text_line(text: str, queue: PrintQueue) -> None:
    line = _Peekable(text)
    while (c := line.next()) is not None:
        if c == "*":
            queue.push(PrinterItem(_emphasis(line), Color.MAGENTA))
        elif c == "`":
            queue.push(PrinterItem(_quoted(line), Color.DARK_GREEN))
        elif c in _SYMBOLS:
            queue.push(PrinterItem(c, Color.DARK_RED))
        else:
            queue.push(PrinterItem(c, Color.WHITE))


def parse_markdown(text: str) -> PrintQueue:
    """Colour headings, code blocks, emphasis and inline code of a markdown text."""
    queue = PrintQueue()
    lines = iter(_lines(text))
    for line in lines:
        stripped = line.lstrip()
        if stripped.startswith("##"):
            queue.push(PrinterItem(line, Color.YELLOW))
        elif stripped.startswith("#"):
            queue.push(PrinterItem(line, Color.RED))
        elif stripped.startswith("```rust"):
            queue.push(PrinterItem(line, Color.CYAN))
            queue.add_new_line(1)
            code_lines: list[str] = []
            # the closing fence is consumed together with the code
            for code_line in lines:
                if code_line.startswith("```"):
                    break
                code_lines.append(code_line)
            code = "\n".join(code_lines)
            if code:
                queue.push(PrinterItem(code, Color.WHITE))
        else:
            _render_text_line(line, queue)
        queue.add_new_line(1)
    return queue