"""Printable output queues and formatting of compiler output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .theme import Color

_HOST_CRATE_MARK = "irust_host_repl v0.1.0"
_ABORT_MARK = ": aborting due to "
_CHECK_OK_MARK = "dev [unoptimized + debuginfo]"


@dataclass(frozen=True)
class PrinterItem:
    """A piece of text with an optional colour; a bare newline has none."""

    text: str
    color: Color | None = None


@dataclass
class PrintQueue:
    """Ordered items waiting to be printed."""

    items: list[PrinterItem] = field(default_factory=list)

    def push(self, item: PrinterItem) -> None:
        self.items.append(item)

    def add_new_line(self, count: int) -> None:
        self.items.extend(PrinterItem("\n") for _ in range(count))

    def extend(self, other: Iterable[PrinterItem]) -> None:
        self.items.extend(other)

    def __iter__(self) -> Iterator[PrinterItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def format_err(output: str) -> PrintQueue:
    """Keep only the relevant part of long compiler output, coloured red."""
    lines = _lines(output)
    if len(lines) > 8:
        kept: list[str] = []
        started = False
        for line in lines:
            if not started:
                # skip warnings up to and including the host crate line
                started = _HOST_CRATE_MARK in line
                continue
            if _ABORT_MARK in line:
                break
            kept.append(line)
        actual_error = "\n".join(kept)
    else:
        actual_error = output
    queue = PrintQueue()
    queue.push(PrinterItem(actual_error, Color.RED))
    return queue


def format_eval_output(success: bool, output: str, prompt: str) -> PrintQueue | None:
    """Format the result of an evaluation; None when it produced unit."""
    if not success:
        return format_err(output)
    if output.strip() == "()":
        return None
    queue = PrintQueue()
    queue.push(PrinterItem(prompt, Color.RED))
    queue.push(PrinterItem(output, Color.WHITE))
    queue.add_new_line(1)
    return queue


def format_check_output(output: str) -> PrintQueue | None:
    """Return an error queue when a check did not finish cleanly."""
    if _CHECK_OK_MARK not in output:
        return format_err(output)
    return None