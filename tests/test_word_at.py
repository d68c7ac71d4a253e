"""Tests for the CJK word lookup and its reversible host override."""

import logging

import pytest

from pybamboo.document import TextDocument
from pybamboo.editor import SelectionRange
from pybamboo.word_at import CjkWordLookup, WordAtPatch


def original_lookup(doc, pos):
    return ("original", pos)


class FakeHost:
    def __init__(self, text):
        self.doc = TextDocument(text)

    def word_at(self, pos):
        return ("original", pos)


class TestCjkWordLookup:
    def test_returns_containing_cjk_segment(self, service):
        lookup = CjkWordLookup(service, original_lookup)

        assert lookup(TextDocument("hello世界test"), 6) == SelectionRange(5, 7)

    def test_cjk_on_either_side_is_enough(self, service):
        lookup = CjkWordLookup(service, original_lookup)
        doc = TextDocument("hello世界test")

        # Left neighbour is "o", right neighbour is "世"
        assert lookup(doc, 5) == SelectionRange(5, 7)
        # Left neighbour is "界", the segment starting here is "test"
        assert lookup(doc, 7) == SelectionRange(7, 11)

    def test_no_cjk_neighbour_uses_fallback(self, service):
        lookup = CjkWordLookup(service, original_lookup)

        assert lookup(TextDocument("hello世界test"), 2) == ("original", 2)

    def test_punctuation_segment_uses_fallback(self, service):
        lookup = CjkWordLookup(service, original_lookup)

        assert lookup(TextDocument("你好，世界"), 2) == ("original", 2)

    def test_second_line_offsets(self, service):
        lookup = CjkWordLookup(service, original_lookup)

        assert lookup(TextDocument("abc\n你好 世界"), 8) == SelectionRange(7, 9)


class TestWordAtPatch:
    def test_install_and_uninstall(self, service):
        original = FakeHost.word_at
        patch = WordAtPatch(FakeHost, service)

        assert patch.install() is True
        try:
            host = FakeHost("hello世界test")
            assert host.word_at(6) == SelectionRange(5, 7)
            assert host.word_at(2) == ("original", 2)
        finally:
            patch.uninstall()

        assert FakeHost.word_at is original
        assert FakeHost("hello世界test").word_at(6) == ("original", 6)

    def test_double_install_raises(self, service):
        patch = WordAtPatch(FakeHost, service)
        patch.install()
        try:
            with pytest.raises(RuntimeError, match="already installed"):
                patch.install()
        finally:
            patch.uninstall()

    def test_uninstall_is_idempotent(self, service):
        original = FakeHost.word_at
        patch = WordAtPatch(FakeHost, service)
        patch.install()

        patch.uninstall()
        patch.uninstall()

        assert FakeHost.word_at is original
        assert patch.installed is False

    def test_context_manager(self, service):
        original = FakeHost.word_at

        with WordAtPatch(FakeHost, service):
            assert FakeHost.word_at is not original

        assert FakeHost.word_at is original

    def test_inherited_method_is_exposed_again(self, service):
        class Child(FakeHost):
            pass

        with WordAtPatch(Child, service):
            assert Child("世界").word_at(1) == SelectionRange(0, 2)

        assert "word_at" not in vars(Child)
        assert Child.word_at is FakeHost.word_at

    def test_custom_attribute_and_doc_getter(self, service):
        class Host:
            def __init__(self, text):
                self.buffer = TextDocument(text)

            def lookup_word(self, pos):
                return None

        patch = WordAtPatch(
            Host,
            service,
            attribute="lookup_word",
            doc_getter=lambda host: host.buffer,
        )
        with patch:
            assert Host("東京 tower").lookup_word(0) == SelectionRange(0, 2)
            assert Host("東京 tower").lookup_word(5) is None

    def test_missing_attribute_fails_cleanly(self, service, caplog):
        patch = WordAtPatch(FakeHost, service, attribute="missing")

        with caplog.at_level(logging.WARNING):
            assert patch.install() is False

        assert patch.installed is False
        assert "keeping original behavior" in caplog.text
        assert not hasattr(FakeHost, "missing")

    def test_failed_setattr_keeps_original(self, service, caplog):
        class Frozen(type):
            def __setattr__(cls, name, value):
                raise TypeError("frozen host")

        class FrozenHost(metaclass=Frozen):
            def __init__(self, text):
                self.doc = TextDocument(text)

            def word_at(self, pos):
                return "original"

        original = FrozenHost.word_at
        patch = WordAtPatch(FrozenHost, service)

        with caplog.at_level(logging.WARNING):
            assert patch.install() is False

        assert FrozenHost.word_at is original
        assert FrozenHost("世界").word_at(0) == "original"
