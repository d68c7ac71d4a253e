"""Selection, change and transaction types exchanged with the host editor.

Commands never mutate the document directly. They build a ``Transaction``
from one snapshot of the editor state and hand it to ``EditorView.dispatch``.
``EditorState`` and ``SimpleView`` are a minimal host implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Protocol

from .document import TextDocument

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .document import Document


class UserEvent:
    """Semantic tags the host uses for input-history coalescing."""

    MOVE_WORD = "move.word"
    SELECT_WORD = "select.word"
    DELETE_WORD = "delete.word"


@dataclass(frozen=True)
class SelectionRange:
    anchor: int
    head: int

    @classmethod
    def cursor(cls, pos: int) -> SelectionRange:
        return cls(anchor=pos, head=pos)

    @property
    def start(self) -> int:
        return min(self.anchor, self.head)

    @property
    def end(self) -> int:
        return max(self.anchor, self.head)

    @property
    def empty(self) -> bool:
        return self.anchor == self.head


@dataclass(frozen=True)
class EditorSelection:
    """A set of selection ranges, one of which is the main (primary) cursor.

    Use ``create`` to get a normalized selection: ranges sorted by position
    with overlapping ranges merged.
    """

    ranges: tuple[SelectionRange, ...]
    main_index: int = 0

    def __post_init__(self) -> None:
        if not self.ranges:
            raise ValueError("EditorSelection needs at least one range")
        if not 0 <= self.main_index < len(self.ranges):
            raise ValueError(
                f"main_index {self.main_index} out of range for "
                f"{len(self.ranges)} ranges"
            )

    @property
    def main(self) -> SelectionRange:
        return self.ranges[self.main_index]

    @classmethod
    def single(cls, anchor: int, head: int | None = None) -> EditorSelection:
        return cls(ranges=(SelectionRange(anchor, anchor if head is None else head),))

    @classmethod
    def create(
        cls, ranges: Sequence[SelectionRange], main_index: int = 0
    ) -> EditorSelection:
        if not ranges:
            raise ValueError("EditorSelection needs at least one range")
        order = sorted(
            range(len(ranges)), key=lambda i: (ranges[i].start, ranges[i].end)
        )

        merged: list[SelectionRange] = []
        new_main = 0
        for idx in order:
            current = ranges[idx]
            if merged:
                prev = merged[-1]
                if current.empty:
                    overlaps = current.start <= prev.end
                else:
                    overlaps = current.start < prev.end
                if overlaps:
                    start, end = prev.start, max(prev.end, current.end)
                    # The merged range keeps the direction of the main range
                    keeper = current if idx == main_index else prev
                    if keeper.head >= keeper.anchor:
                        merged[-1] = SelectionRange(start, end)
                    else:
                        merged[-1] = SelectionRange(end, start)
                    if idx == main_index:
                        new_main = len(merged) - 1
                    continue
            merged.append(current)
            if idx == main_index:
                new_main = len(merged) - 1
        return cls(ranges=tuple(merged), main_index=new_main)


@dataclass(frozen=True)
class Change:
    """Replace ``[start, end)`` with ``insert``. Offsets are pre-edit."""

    start: int
    end: int
    insert: str = ""

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Change start {self.start} is after end {self.end}")


@dataclass(frozen=True)
class ChangeSet:
    """Non-overlapping changes, all expressed against the same document."""

    changes: tuple[Change, ...] = ()

    @classmethod
    def of(cls, changes: Iterable[Change]) -> ChangeSet:
        merged: list[Change] = []
        for change in sorted(changes, key=lambda c: (c.start, c.end)):
            if change.start == change.end and not change.insert:
                continue
            if merged and change.start <= merged[-1].end:
                prev = merged[-1]
                merged[-1] = Change(
                    prev.start, max(prev.end, change.end), prev.insert + change.insert
                )
                continue
            merged.append(change)
        return cls(changes=tuple(merged))

    @property
    def empty(self) -> bool:
        return not self.changes

    def map_pos(self, pos: int) -> int:
        """Map a pre-edit offset to the corresponding post-edit offset."""
        shift = 0
        for change in self.changes:
            if pos < change.start:
                break
            if pos < change.end:
                return change.start + shift
            shift += len(change.insert) - (change.end - change.start)
        return pos + shift

    def apply(self, text: str) -> str:
        out: list[str] = []
        cursor = 0
        for change in self.changes:
            out.append(text[cursor : change.start])
            out.append(change.insert)
            cursor = change.end
        out.append(text[cursor:])
        return "".join(out)


@dataclass(frozen=True)
class Transaction:
    """One atomic update: optional document changes plus the new selection.

    ``selection`` is expressed in post-edit offsets.
    """

    selection: EditorSelection
    changes: ChangeSet = field(default_factory=ChangeSet)
    user_event: str | None = None
    scroll_into_view: bool = False


@dataclass(frozen=True)
class EditorState:
    doc: Document
    selection: EditorSelection

    @classmethod
    def create(
        cls, text: str, selection: EditorSelection | None = None
    ) -> EditorState:
        return cls(
            doc=TextDocument(text),
            selection=selection or EditorSelection.single(0),
        )

    def apply(self, transaction: Transaction) -> EditorState:
        doc = self.doc
        if not transaction.changes.empty:
            doc = TextDocument(transaction.changes.apply(doc.slice(0, doc.length)))
        return replace(self, doc=doc, selection=transaction.selection)


class EditorView(Protocol):
    @property
    def state(self) -> EditorState: ...

    def dispatch(self, transaction: Transaction) -> None: ...


class SimpleView:
    """In-memory view that applies and records dispatched transactions."""

    def __init__(self, state: EditorState) -> None:
        self.state = state
        self.transactions: list[Transaction] = []

    def dispatch(self, transaction: Transaction) -> None:
        self.transactions.append(transaction)
        self.state = self.state.apply(transaction)
