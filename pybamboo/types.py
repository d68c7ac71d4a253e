from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Segment:
    """A token of one line with offsets relative to the start of that line."""

    char_start: int
    char_end: int
    is_word_like: bool
    text: str


@dataclass(frozen=True)
class SegmentHit:
    """A segment located inside a document, together with its line extent."""

    line_start: int
    line_end: int
    segment: Segment

    @property
    def start(self) -> int:
        return self.line_start + self.segment.char_start

    @property
    def end(self) -> int:
        return self.line_start + self.segment.char_end
