"""Document access used by the boundary engine and commands.

The host editor owns the real text buffer; it only has to satisfy the
``Document`` protocol. ``TextDocument`` is a small in-memory implementation.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Line:
    """One line of a document. ``end`` excludes the line break."""

    number: int
    start: int
    end: int
    text: str

    @property
    def length(self) -> int:
        return self.end - self.start


class Document(Protocol):
    @property
    def length(self) -> int: ...

    def line_at(self, pos: int) -> Line:
        """Return the line containing absolute offset ``pos``."""
        ...

    def slice(self, start: int, end: int) -> str: ...


class TextDocument:
    """Immutable in-memory document. Lines are separated by ``"\\n"``."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._line_starts = [0]
        for idx, ch in enumerate(text):
            if ch == "\n":
                self._line_starts.append(idx + 1)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"TextDocument({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextDocument):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        return len(self._text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line(self, number: int) -> Line:
        """Return line ``number`` (1-based)."""
        if not 1 <= number <= len(self._line_starts):
            raise ValueError(
                f"Line {number} out of range (document has {self.line_count} lines)"
            )
        start = self._line_starts[number - 1]
        if number < len(self._line_starts):
            end = self._line_starts[number] - 1
        else:
            end = len(self._text)
        return Line(number=number, start=start, end=end, text=self._text[start:end])

    def line_at(self, pos: int) -> Line:
        if not 0 <= pos <= len(self._text):
            raise ValueError(
                f"Position {pos} out of range for document of length {self.length}"
            )
        return self.line(bisect_right(self._line_starts, pos))

    def slice(self, start: int, end: int) -> str:
        return self._text[start:end]
