"""Tests for pybamboo.script."""

import pytest

from pybamboo.script import has_cjk, is_cjk, is_japanese, is_korean, locale_for


@pytest.mark.parametrize("char", ["世", "ひ", "カ", "한", "々", "ー", "ｰ"])
def test_is_cjk_true(char):
    assert is_cjk(char)


@pytest.mark.parametrize("char", ["a", "1", "_", " ", "，", "、", "・", "!", "é", ""])
def test_is_cjk_false(char):
    assert not is_cjk(char)


def test_non_string_input_is_false():
    assert not is_cjk(None)
    assert not is_japanese(None)
    assert not is_korean(None)


def test_japanese_and_korean_predicates():
    assert is_japanese("ひ")
    assert is_japanese("カ")
    assert not is_japanese("世")
    assert not is_japanese("한")
    assert is_korean("한")
    assert not is_korean("世")


def test_has_cjk_scans_whole_text():
    assert has_cjk("hello世界")
    assert not has_cjk("hello world")


class TestLocaleFor:
    def test_default_is_chinese(self):
        assert locale_for("你好世界") == "zh"
        assert locale_for("plain text") == "zh"
        assert locale_for("") == "zh"

    def test_kana_selects_japanese(self):
        assert locale_for("東京タワー") == "ja"

    def test_hangul_selects_korean(self):
        assert locale_for("안녕하세요") == "ko"

    def test_kana_wins_over_hangul(self):
        assert locale_for("안녕 ひらがな") == "ja"
