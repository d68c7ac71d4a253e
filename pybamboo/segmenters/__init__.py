from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .base import WordSegmenter
from .fallback import FallbackSegmenter
from .icu import IcuSegmenter

if TYPE_CHECKING:
    from ..config import BambooConfig

logger = logging.getLogger(__name__)

__all__ = ["FallbackSegmenter", "IcuSegmenter", "WordSegmenter", "create_segmenter"]


def create_segmenter(config: BambooConfig) -> WordSegmenter:
    """Choose the word segmenter for the lifetime of a service.

    ICU is used when requested (or on ``"auto"``) and importable; otherwise
    the rule-based fallback is returned. The decision is never revisited.
    """
    if config.segmenter == "fallback":
        logger.debug("Using fallback word segmenter (configured)")
        return FallbackSegmenter()

    if IcuSegmenter.is_available():
        logger.debug("Using ICU word segmenter for locales %s", config.locales)
        return IcuSegmenter(config.locales)

    if config.segmenter == "icu":
        logger.warning(
            "ICU word segmentation requested but PyICU is not available. "
            "Falling back to rule-based segmentation."
        )
    else:
        logger.debug("PyICU not available, using fallback word segmenter")
    return FallbackSegmenter()
