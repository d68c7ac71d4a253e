"""Tests for the in-memory document and editor model."""

import pytest

from pybamboo.document import Line, TextDocument
from pybamboo.editor import (
    Change,
    ChangeSet,
    EditorSelection,
    EditorState,
    SelectionRange,
    Transaction,
)


class TestTextDocument:
    def test_line_at(self):
        doc = TextDocument("abc\n世界\n")

        assert doc.line_at(0) == Line(number=1, start=0, end=3, text="abc")
        assert doc.line_at(3) == Line(number=1, start=0, end=3, text="abc")
        assert doc.line_at(4) == Line(number=2, start=4, end=6, text="世界")
        assert doc.line_at(7) == Line(number=3, start=7, end=7, text="")
        assert doc.line_count == 3

    def test_line_at_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            TextDocument("abc").line_at(4)

    def test_line_number_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            TextDocument("abc").line(2)

    def test_slice_and_length(self):
        doc = TextDocument("你好 world")

        assert doc.length == 8
        assert doc.slice(1, 4) == "好 w"


class TestEditorSelection:
    def test_requires_a_range(self):
        with pytest.raises(ValueError):
            EditorSelection(ranges=())

    def test_create_sorts_ranges_and_tracks_main(self):
        selection = EditorSelection.create(
            [SelectionRange(5, 5), SelectionRange(1, 1)], main_index=0
        )

        assert selection.ranges == (SelectionRange(1, 1), SelectionRange(5, 5))
        assert selection.main == SelectionRange(5, 5)

    def test_create_merges_overlapping_ranges(self):
        selection = EditorSelection.create(
            [SelectionRange(0, 4), SelectionRange(6, 2), SelectionRange(9, 9)],
            main_index=1,
        )

        assert selection.ranges == (SelectionRange(6, 0), SelectionRange(9, 9))
        assert selection.main_index == 0

    def test_create_merges_equal_cursors(self):
        selection = EditorSelection.create([SelectionRange(3, 3), SelectionRange(3, 3)])

        assert selection.ranges == (SelectionRange(3, 3),)

    def test_single(self):
        assert EditorSelection.single(2).main == SelectionRange(2, 2)
        assert EditorSelection.single(2, 4).main == SelectionRange(2, 4)


class TestChangeSet:
    def test_apply_uses_pre_edit_offsets(self):
        changes = ChangeSet.of([Change(6, 8), Change(0, 2, "ab")])

        assert changes.apply("世界 你好 end") == "ab 你好 d"

    def test_overlapping_changes_are_merged(self):
        changes = ChangeSet.of([Change(0, 3), Change(2, 5)])

        assert changes.changes == (Change(0, 5),)

    def test_empty_changes_are_dropped(self):
        assert ChangeSet.of([Change(2, 2)]).empty

    def test_map_pos(self):
        changes = ChangeSet.of([Change(2, 4), Change(6, 7, "xyz")])

        assert changes.map_pos(1) == 1
        assert changes.map_pos(3) == 2
        assert changes.map_pos(4) == 2
        assert changes.map_pos(6) == 4
        assert changes.map_pos(9) == 9

    def test_invalid_change(self):
        with pytest.raises(ValueError):
            Change(3, 1)


def test_state_apply_replaces_document_and_selection():
    state = EditorState.create("hello世界test", EditorSelection.single(7))
    tx = Transaction(
        selection=EditorSelection.single(5),
        changes=ChangeSet.of([Change(5, 7)]),
    )

    new_state = state.apply(tx)

    assert new_state.doc.text == "hellotest"
    assert new_state.selection.main.head == 5
    assert state.doc.text == "hello世界test"
