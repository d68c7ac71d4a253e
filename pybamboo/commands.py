"""Editor commands that move, extend and delete by CJK-aware segments.

Each factory returns a command ``(view) -> bool``. A command returns False
("not handled") when the main cursor has no CJK neighbour or when it would
not change anything, so the host can run its default word command instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from .boundary import FORWARD, BoundaryEngine, has_cjk_around
from .editor import (
    Change,
    ChangeSet,
    EditorSelection,
    EditorView,
    SelectionRange,
    Transaction,
    UserEvent,
)

if TYPE_CHECKING:
    from .service import SegmenterService

logger = logging.getLogger(__name__)

Command = Callable[[EditorView], bool]


def move_by_segment(
    service: SegmenterService, direction: int, extend: bool = False
) -> Command:
    """Build a command moving every cursor head to the next segment boundary.

    Args:
        service: Segmenter service shared by all commands
        direction: ``1`` moves right, ``-1`` moves left
        extend: Keep each anchor in place and only move the head

    Returns:
        Command callable taking the editor view
    """
    engine = BoundaryEngine(service)

    def run(view: EditorView) -> bool:
        state = view.state
        doc = state.doc
        prev = state.selection
        if not has_cjk_around(doc, prev.main.head):
            logger.debug("No CJK around main cursor, move declined")
            return False

        next_ranges = []
        for current in prev.ranges:
            target = engine.next_boundary(doc, current.head, direction)
            anchor = current.anchor if extend else target
            next_ranges.append(SelectionRange(anchor=anchor, head=target))

        if all(
            old.anchor == new.anchor and old.head == new.head
            for old, new in zip(prev.ranges, next_ranges)
        ):
            return False

        view.dispatch(
            Transaction(
                selection=EditorSelection.create(next_ranges, prev.main_index),
                user_event=UserEvent.SELECT_WORD if extend else UserEvent.MOVE_WORD,
                scroll_into_view=True,
            )
        )
        return True

    return run


def delete_by_segment(service: SegmenterService, direction: int) -> Command:
    """Build a command deleting from every cursor to the next segment boundary.

    Non-empty selections are deleted as they are, regardless of direction.
    All targets are computed against the state before the edit and applied
    as a single transaction.
    """
    engine = BoundaryEngine(service)

    def run(view: EditorView) -> bool:
        state = view.state
        doc = state.doc
        selection = state.selection
        if not has_cjk_around(doc, selection.main.head):
            logger.debug("No CJK around main cursor, delete declined")
            return False

        changes: list[Change] = []
        cursors: list[int] = []
        for current in selection.ranges:
            if not current.empty:
                changes.append(Change(current.start, current.end))
                cursors.append(current.start)
                continue
            target = engine.next_boundary(doc, current.head, direction)
            if direction == FORWARD:
                start, end = current.head, target
            else:
                start, end = target, current.head
            if start != end:
                changes.append(Change(start, end))
            cursors.append(start if start != end else current.head)

        change_set = ChangeSet.of(changes)
        if change_set.empty:
            return False

        ranges = [SelectionRange.cursor(change_set.map_pos(pos)) for pos in cursors]
        view.dispatch(
            Transaction(
                selection=EditorSelection.create(ranges, selection.main_index),
                changes=change_set,
                user_event=UserEvent.DELETE_WORD,
                scroll_into_view=True,
            )
        )
        return True

    return run
