"""Script classification for CJK text.

Answers "is this character CJK / Japanese / Korean" using Unicode script
properties. Han, Hiragana, Katakana and Hangul count as CJK.
"""

from __future__ import annotations

import regex

from .constants import DEFAULT_LOCALE

CJK_SCRIPTS = r"\p{Script=Han}\p{Script=Hiragana}\p{Script=Katakana}\p{Script=Hangul}"
CJK_EXTENSIONS = (
    r"\p{Script_Extensions=Han}\p{Script_Extensions=Hiragana}"
    r"\p{Script_Extensions=Katakana}\p{Script_Extensions=Hangul}"
)
# Modifier letters such as U+30FC "ー" are Script=Common; their
# Script_Extensions keep them inside the CJK run they belong to.
CJK_CLASS = rf"(?:[{CJK_SCRIPTS}]|(?=\p{{Lm}})[{CJK_EXTENSIONS}])"

CJK_CHAR = regex.compile(CJK_CLASS)
JA_CHAR = regex.compile(r"[\p{Script=Hiragana}\p{Script=Katakana}]")
KO_CHAR = regex.compile(r"\p{Script=Hangul}")


def _test(pattern: regex.Pattern, text: object) -> bool:
    if not isinstance(text, str) or not text:
        return False
    return pattern.search(text) is not None


def is_cjk(char: str) -> bool:
    """Return True if ``char`` contains a Han, Hiragana, Katakana or Hangul char.

    Examples:
        >>> is_cjk("世")
        True
        >>> is_cjk("a")
        False
        >>> is_cjk("")
        False
    """
    return _test(CJK_CHAR, char)


def is_japanese(char: str) -> bool:
    """Return True for Hiragana or Katakana."""
    return _test(JA_CHAR, char)


def is_korean(char: str) -> bool:
    """Return True for Hangul."""
    return _test(KO_CHAR, char)


def has_cjk(text: str) -> bool:
    """Return True if any character of ``text`` is CJK."""
    return _test(CJK_CHAR, text)


def locale_for(text: str) -> str:
    """Pick a segmentation locale from the scripts present in ``text``.

    Kana anywhere means Japanese, otherwise Hangul means Korean, otherwise
    Chinese. This is a script heuristic, not language detection: a line mixing
    Japanese and Korean is segmented with the Japanese rules.
    """
    if is_japanese(text):
        return "ja"
    if is_korean(text):
        return "ko"
    return DEFAULT_LOCALE
