"""Segment lookup and word-boundary walking over a document.

Boundaries are searched line by line so only one line's segments are needed
at a time, and each line is served from the segmentation cache on its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .script import has_cjk
from .types import Segment, SegmentHit

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .document import Document
    from .service import SegmenterService

FORWARD = 1
BACKWARD = -1


def find_segment_at(segments: Sequence[Segment], local_pos: int) -> Segment | None:
    """Find the segment containing ``local_pos`` within one tokenized line.

    The primary pass uses the half-open interval ``[char_start, char_end)`` so
    a position exactly between two segments belongs to the one starting there.
    If nothing contains the position (end of line), the rightmost segment
    ending exactly at it is returned.

    Examples:
        >>> segs = [Segment(0, 2, True, "你好"), Segment(2, 3, False, "，")]
        >>> find_segment_at(segs, 2).text
        '，'
        >>> find_segment_at(segs, 3).text
        '，'
        >>> find_segment_at([], 0) is None
        True
    """
    for seg in segments:
        if seg.char_start <= local_pos < seg.char_end:
            return seg
    for seg in reversed(segments):
        if seg.char_end == local_pos:
            return seg
    return None


def has_cjk_around(doc: Document, pos: int) -> bool:
    """Check the characters immediately left and right of ``pos`` for CJK."""
    # One slice of at most two characters covers both neighbours
    neighbourhood = doc.slice(max(0, pos - 1), min(doc.length, pos + 1))
    return has_cjk(neighbourhood)


def _check_direction(direction: int) -> None:
    if direction not in (FORWARD, BACKWARD):
        raise ValueError(f"direction must be 1 or -1, got {direction}")


class BoundaryEngine:
    """Answers segment and boundary queries against a host document.

    Args:
        service: Segmenter service that supplies (cached) line segments
    """

    def __init__(self, service: SegmenterService) -> None:
        self.service = service

    def segment_at(self, line_text: str, local_pos: int) -> Segment | None:
        return find_segment_at(self.service.segments_for(line_text), local_pos)

    def segment_at_pos(self, doc: Document, pos: int) -> SegmentHit | None:
        """Locate the segment under absolute offset ``pos``."""
        pos = max(0, min(pos, doc.length))
        line = doc.line_at(pos)
        local_pos = max(0, min(pos - line.start, line.length))
        segment = self.segment_at(line.text, local_pos)
        if segment is None:
            return None
        return SegmentHit(line_start=line.start, line_end=line.end, segment=segment)

    def next_boundary(self, doc: Document, pos: int, direction: int) -> int:
        """Return the next segment edge strictly in ``direction`` from ``pos``.

        Line breaks are crossed as needed. At the start of the document
        (backward) or its end (forward) the extreme is returned unchanged.

        Args:
            doc: Document to walk
            pos: Absolute start offset
            direction: ``1`` for forward, ``-1`` for backward

        Returns:
            Absolute offset of the boundary

        Raises:
            ValueError: If direction is not 1 or -1
        """
        _check_direction(direction)
        length = doc.length
        pos = max(0, min(pos, length))
        if direction == FORWARD and pos >= length:
            return length
        if direction == BACKWARD and pos <= 0:
            return 0

        cursor = pos
        while True:
            line = doc.line_at(cursor)
            local_pos = cursor - line.start
            segments = self.service.segments_for(line.text)

            if direction == FORWARD:
                for seg in segments:
                    if seg.char_start > local_pos:
                        return line.start + seg.char_start
                    if seg.char_start <= local_pos < seg.char_end:
                        return line.start + seg.char_end
                # Line exhausted: continue at the start of the next line
                if line.end < length:
                    cursor = line.end + 1
                    continue
                return length

            for seg in reversed(segments):
                if seg.char_end < local_pos:
                    return line.start + seg.char_end
                if seg.char_start < local_pos <= seg.char_end:
                    return line.start + seg.char_start
            # Line exhausted: continue at the end of the previous line
            if line.start > 0:
                cursor = line.start - 1
                continue
            return 0
