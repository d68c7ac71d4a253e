from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from .boundary import BoundaryEngine
from .constants import PRIMARY_BUTTON, WORD_CLICK_COUNT
from .editor import SelectionRange
from .script import has_cjk

if TYPE_CHECKING:
    from .document import Document
    from .service import SegmenterService

logger = logging.getLogger(__name__)


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DragSelectionController:
    """Double-click-and-drag word selection over CJK text.

    A double click on a CJK word anchors the selection on that word. Each
    pointer sample then grows the selection to the union of the anchor and
    the word under the pointer. Off CJK text the selection extends to the raw
    pointer offset instead.
    """

    def __init__(self, service: SegmenterService) -> None:
        self._engine = BoundaryEngine(service)
        self.state = DragState.IDLE
        self.anchor: tuple[int, int] | None = None

    @property
    def dragging(self) -> bool:
        return self.state is DragState.DRAGGING

    def begin(
        self,
        doc: Document,
        pos: int | None,
        *,
        button: int = PRIMARY_BUTTON,
        click_count: int = WORD_CLICK_COUNT,
    ) -> bool:
        """Start a drag if the gesture is a word click on CJK text.

        Returns:
            False when the gesture is declined and should be handled by the
            host's default selection behavior
        """
        if button != PRIMARY_BUTTON or click_count != WORD_CLICK_COUNT:
            return False
        if pos is None:
            return False
        hit = self._engine.segment_at_pos(doc, pos)
        if hit is None or not hit.segment.is_word_like:
            return False
        if not has_cjk(hit.segment.text):
            return False

        self.anchor = (hit.start, hit.end)
        self.state = DragState.DRAGGING
        logger.debug("Started CJK word drag at [%d, %d)", hit.start, hit.end)
        return True

    def update(self, doc: Document, pos: int | None) -> SelectionRange:
        """Compute the selection for one pointer sample.

        Raises:
            RuntimeError: If no drag is in progress
        """
        if self.anchor is None:
            raise RuntimeError("update() called without an active drag")

        anchor_start = self.anchor[0]
        sel_start, sel_end = self.anchor
        dragging_left = False

        if pos is not None:
            hit = self._engine.segment_at_pos(doc, pos)
            if hit is not None and has_cjk(hit.segment.text):
                sel_start = min(sel_start, hit.start)
                sel_end = max(sel_end, hit.end)
                dragging_left = hit.start < anchor_start
            elif pos < sel_start:
                # Off CJK text: follow the raw pointer instead of freezing
                sel_start = pos
                dragging_left = True
            elif pos > sel_end:
                sel_end = pos

        # The head follows the pointer
        if dragging_left:
            return SelectionRange(anchor=sel_end, head=sel_start)
        return SelectionRange(anchor=sel_start, head=sel_end)

    def end(self) -> None:
        if self.dragging:
            logger.debug("Finished CJK word drag")
        self.state = DragState.IDLE
        self.anchor = None
