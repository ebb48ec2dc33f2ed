"""Input history with prefix-filtered navigation and persistence."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import platformdirs

# marks files written in the separator-based format
NEW_HISTORY_MARK = "##NewHistoryMark##\n//\n"
_SEPARATOR = "\n//\n"


def _default_path() -> Path:
    return Path(platformdirs.user_cache_dir("irust_repl")) / "history"


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _dedup(items: list[str]) -> list[str]:
    result: list[str] = []
    for item in items:
        if not result or result[-1] != item:
            result.append(item)
    return result


@dataclass
class History:
    """Entries in the order they were entered, newest last."""

    path: Path
    entries: list[str] = field(default_factory=list)
    cursor: int = 0
    locked: bool = False
    last_buffer: str = ""

    @classmethod
    def load(cls, path: Path | str | None = None) -> "History":
        """Read the history file, creating it empty if it does not exist."""
        source = Path(path) if path is not None else _default_path()
        if not source.exists():
            source.parent.mkdir(parents=True, exist_ok=True)
            source.touch()
        text = source.read_text(encoding="utf-8")
        if text.startswith(NEW_HISTORY_MARK):
            entries = text.split(_SEPARATOR)[1:]
        else:
            entries = _lines(text)
        return cls(path=source, entries=entries)

    def _filter(self, buffer: str) -> tuple[str | None, int]:
        matches = _dedup([entry for entry in reversed(self.entries) if buffer in entry])
        index = max(self.cursor - 1, 0)
        hit = matches[index] if index < len(matches) else None
        return hit, len(matches)

    def down(self, buffer: str) -> str | None:
        """Step towards newer entries; returns the original input at the bottom."""
        if not self.locked:
            self.last_buffer = buffer
            self.cursor = 1
        self.cursor = max(self.cursor - 1, 0)
        if self.cursor == 0:
            return self.last_buffer
        hit, _ = self._filter(self.last_buffer)
        return hit

    def up(self, buffer: str) -> str | None:
        """Step towards older entries containing the original input."""
        if not self.locked:
            self.last_buffer = buffer
            self.cursor = 0
        self.cursor += 1
        hit, count = self._filter(self.last_buffer)
        if self.cursor + 1 >= count:
            self.cursor = count
        return hit

    def push(self, entry: str) -> None:
        """Append an entry unless it is empty or repeats the last one."""
        if entry and (not self.entries or self.entries[-1] != entry):
            self.entries.append(entry)
            self.cursor = 0

    def save(self) -> None:
        """Write the history, dropping comment lines from each entry."""
        entries = list(self.entries)
        if not entries or entries[0] != NEW_HISTORY_MARK:
            entries.insert(0, NEW_HISTORY_MARK)
        cleaned = [
            "\n".join(line for line in _lines(entry) if not line.lstrip().startswith("//"))
            for entry in entries
        ]
        self.path.write_text(_SEPARATOR.join(cleaned), encoding="utf-8")

    def reverse_find_nth(self, needle: str, n: int) -> str | None:
        """The n-th most recent distinct entry containing needle."""
        matches = [entry for entry in _dedup(list(reversed(self.entries))) if needle in entry]
        return matches[n] if n < len(matches) else None

    def lock(self) -> None:
        self.locked = True

    def unlock(self) -> None:
        self.locked = False