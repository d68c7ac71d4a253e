from __future__ import annotations

import regex

from ..script import CJK_CLASS
from ..types import Segment

__all__ = ["FallbackSegmenter", "FALLBACK_SEGMENT_RE"]

# One alternation, tried left to right at every position, so a single
# finditer pass partitions the text.
FALLBACK_SEGMENT_RE = regex.compile(
    rf"(?P<cjk>{CJK_CLASS}+)"
    rf"|(?P<word>(?:(?!{CJK_CLASS})[\p{{L}}\p{{N}}_])+)"
    r"|(?P<space>\s+)"
    r"|(?P<punct>\S)"
)

_WORD_LIKE_GROUPS = frozenset({"cjk", "word"})


class FallbackSegmenter:
    """Rule-based segmenter used when no locale-aware segmenter is available.

    Produces maximal CJK runs, maximal non-CJK letter/digit/underscore runs,
    maximal whitespace runs, and one segment per remaining character.
    """

    name = "fallback"

    def segment(self, text: str) -> list[Segment]:
        return [
            Segment(
                char_start=match.start(),
                char_end=match.end(),
                is_word_like=match.lastgroup in _WORD_LIKE_GROUPS,
                text=match.group(),
            )
            for match in FALLBACK_SEGMENT_RE.finditer(text)
        ]
