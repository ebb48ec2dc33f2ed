"""Editing of the input line and incremental history search."""

from __future__ import annotations

from dataclasses import dataclass

from .history import History

SEARCH_TITLE = "search history: "
TITLE_WIDTH = len(SEARCH_TITLE)


@dataclass
class LineBuffer:
    """The text being typed and the position of the cursor within it."""

    text: str = ""
    cursor: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.cursor <= len(self.text):
            raise ValueError("cursor is outside the buffer")

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    @property
    def current_char(self) -> str | None:
        return self.text[self.cursor] if self.cursor < len(self.text) else None

    @property
    def previous_char(self) -> str | None:
        return self.text[self.cursor - 1] if self.cursor > 0 else None

    @property
    def next_char(self) -> str | None:
        index = self.cursor + 1
        return self.text[index] if index < len(self.text) else None

    def _forward(self) -> None:
        self.cursor = min(self.cursor + 1, len(self.text))

    def _backward(self) -> None:
        self.cursor = max(self.cursor - 1, 0)

    def _remove_current(self) -> None:
        if self.cursor < len(self.text):
            self.text = self.text[: self.cursor] + self.text[self.cursor + 1 :]

    def insert(self, text: str) -> None:
        """Insert text at the cursor and move past it."""
        self.text = self.text[: self.cursor] + text + self.text[self.cursor :]
        self.cursor += len(text)

    def backspace(self) -> None:
        """Remove the character before the cursor."""
        if self.cursor > 0:
            self._backward()
            self._remove_current()

    def delete(self) -> None:
        """Remove the character under the cursor."""
        if self.text:
            self._remove_current()

    def move_left(self) -> None:
        if self.cursor > 0 and self.text:
            self._backward()

    def move_right(self) -> None:
        if self.cursor < len(self.text):
            self._forward()

    def word_right(self) -> None:
        """Jump forward over the next run of blanks, word characters or symbols."""
        self.move_right()
        current = self.current_char
        if current is None:
            return
        if current == " ":
            while self.next_char == " ":
                self._forward()
            self._forward()
        elif current.isalnum():
            while (c := self.current_char) is not None and c.isalnum():
                self._forward()
        else:
            while (c := self.current_char) is not None and not c.isalnum() and c != " ":
                self._forward()

    def word_left(self) -> None:
        """Jump back to the start of the previous run of blanks, word characters or symbols."""
        self.move_left()
        current = self.current_char
        if current is None:
            return
        if current == " ":
            while self.previous_char == " ":
                self._backward()
        elif current.isalnum():
            while (c := self.previous_char) is not None and c.isalnum():
                self._backward()
        else:
            while (c := self.previous_char) is not None and not c.isalnum() and c != " ":
                self._backward()

    def delete_next_word(self) -> None:
        """Delete the run of blanks or of non-blanks starting at the cursor."""
        current = self.current_char
        if current is None:
            return
        blank = current.isspace()
        while (c := self.current_char) is not None and c.isspace() == blank:
            self.delete()

    def home(self) -> None:
        """Move to the start of the current line."""
        self.cursor = self.text.rfind("\n", 0, self.cursor) + 1

    def end(self) -> None:
        """Move to the end of the current line."""
        newline = self.text.find("\n", self.cursor)
        self.cursor = newline if newline >= 0 else len(self.text)

    def clear(self) -> None:
        self.text = ""
        self.cursor = 0


@dataclass
class HistorySearch:
    """Reverse incremental search through the history.

    ``width`` is the terminal width; when given, it limits the needle so that
    it fits on the search line after the title.
    """

    history: History
    width: int | None = None
    needle: str = ""
    index: int = 0
    match: str = ""

    def _find(self) -> bool:
        hit = self.history.reverse_find_nth(self.needle, self.index)
        self.match = hit if hit is not None else ""
        return hit is not None

    def type_char(self, char: str) -> str:
        """Add a character to the needle and show the most recent match."""
        self.index = 0
        if self.width is not None and len(self.needle) + TITLE_WIDTH >= self.width - 1:
            return self.match
        self.needle += char
        self._find()
        return self.match

    def backspace(self) -> str:
        """Drop the last character of the needle and search again."""
        self.index = 0
        self.needle = self.needle[:-1]
        self._find()
        return self.match

    def older(self) -> str:
        """Step to an older match, staying put when there is none."""
        self.index += 1
        if not self._find():
            self.index -= 1
            self._find()
        return self.match

    def newer(self) -> str:
        """Step to a more recent match."""
        self.index = max(self.index - 1, 0)
        self._find()
        return self.match

    def clear(self) -> str:
        """Forget the needle and the match."""
        self.needle = ""
        self.match = ""
        return self.match