from __future__ import annotations

from typing import Protocol

from ..types import Segment


class WordSegmenter(Protocol):
    name: str

    def segment(self, text: str) -> list[Segment]:
        """Split one line of text into segments with line-relative offsets."""
        ...
