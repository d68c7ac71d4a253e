"""Locale-aware word segmentation backed by ICU (PyICU).

One word break iterator is created per locale when the segmenter is built and
reused for every call. ICU reports offsets in UTF-16 code units; they are
converted back to Python string indices before segments are returned.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..constants import DEFAULT_LOCALE, SUPPORTED_LOCALES
from ..script import locale_for
from ..types import Segment

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

# UBRK_WORD_NONE_LIMIT: rule statuses below this mark spaces and punctuation
WORD_NONE_LIMIT = 100


def _utf16_index_map(text: str) -> list[int] | None:
    """Map UTF-16 offsets to string indices, or None when they coincide."""
    if all(ord(ch) < 0x10000 for ch in text):
        return None
    index_map: list[int] = []
    for idx, ch in enumerate(text):
        index_map.append(idx)
        if ord(ch) >= 0x10000:
            # Second half of the surrogate pair maps to the same character
            index_map.append(idx)
    index_map.append(len(text))
    return index_map


class IcuSegmenter:
    name = "icu"

    def __init__(self, locales: Iterable[str] = SUPPORTED_LOCALES) -> None:
        """Create one ICU word break iterator per locale.

        Args:
            locales: Locale codes to prepare, e.g. ``("zh", "ja", "ko")``

        Raises:
            ImportError: If PyICU is not installed
        """
        import icu

        self._iterators: dict[str, Any] = {}
        for locale in locales:
            self._iterators[locale] = icu.BreakIterator.createWordInstance(
                icu.Locale(locale)
            )
        if not self._iterators:
            raise ValueError("IcuSegmenter needs at least one locale")
        if DEFAULT_LOCALE in self._iterators:
            self._default_locale = DEFAULT_LOCALE
        else:
            self._default_locale = next(iter(self._iterators))
        logger.debug("Created ICU word break iterators for %s", list(self._iterators))

    @staticmethod
    def is_available() -> bool:
        try:
            import icu  # noqa: F401
        except ImportError:
            return False
        return True

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._iterators)

    def iterator_for(self, text: str) -> tuple[str, Any]:
        locale = locale_for(text)
        if locale not in self._iterators:
            locale = self._default_locale
        return locale, self._iterators[locale]

    def segment(self, text: str) -> list[Segment]:
        if not text:
            return []
        _, iterator = self.iterator_for(text)
        iterator.setText(text)
        index_map = _utf16_index_map(text)

        out: list[Segment] = []
        start = iterator.first()
        for end in iterator:
            status = iterator.getRuleStatus()
            char_start = index_map[start] if index_map else start
            char_end = index_map[end] if index_map else end
            start = end
            if char_start == char_end:
                continue
            out.append(
                Segment(
                    char_start=char_start,
                    char_end=char_end,
                    is_word_like=status >= WORD_NONE_LIMIT,
                    text=text[char_start:char_end],
                )
            )
        return out
