from __future__ import annotations

import logging

from .config import BambooConfig
from .runtime.cache import CacheInfo, LRUCache
from .segmenters import IcuSegmenter, WordSegmenter, create_segmenter
from .types import Segment

logger = logging.getLogger(__name__)


class SegmenterService:
    """Segments line texts and memoizes the result per line text.

    The segmenter strategy is chosen once, when the service is created. The
    cache key is the verbatim line text, so identical lines anywhere in a
    document share one entry.

    Args:
        config: Service configuration. Defaults to ``BambooConfig()``.
        segmenter: Explicit segmenter strategy. Skips ICU detection.
    """

    def __init__(
        self,
        config: BambooConfig | None = None,
        *,
        segmenter: WordSegmenter | None = None,
    ) -> None:
        self.config = config or BambooConfig()
        self._segmenter = segmenter or create_segmenter(self.config)
        self._cache: LRUCache[str, tuple[Segment, ...]] = LRUCache(
            self.config.cache_size
        )

    @property
    def segmenter(self) -> WordSegmenter:
        return self._segmenter

    @property
    def uses_locale_segmenter(self) -> bool:
        return isinstance(self._segmenter, IcuSegmenter)

    def segments_for(self, text: str) -> tuple[Segment, ...]:
        """Return the segments of one line, computing them on a cache miss.

        A non-empty text always yields at least one segment. The result is
        shared with the cache, so it is returned as a tuple.
        """
        hit = self._cache.get(text)
        if hit is not None:
            return hit

        segments = tuple(self._segmenter.segment(text))
        if not segments and text:
            segments = (
                Segment(char_start=0, char_end=len(text), is_word_like=True, text=text),
            )

        evicted = self._cache.set(text, segments)
        if evicted is not None:
            logger.debug("Evicted segmentation of %d-char line", len(evicted))
        return segments

    def clear(self) -> None:
        self._cache.clear()

    def cache_info(self) -> CacheInfo:
        return self._cache.info()
