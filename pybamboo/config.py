from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .constants import CACHE_MAX, SUPPORTED_LOCALES

SegmenterChoice = Literal["auto", "icu", "fallback"]


@dataclass(frozen=True)
class BambooConfig:
    """User-facing configuration for the segmenter service and plugin.

    Keep this frozen+hashable so one config can be shared between plugins.

    Attributes:
        cache_size: Maximum number of line texts kept in the segmentation cache.
        segmenter: ``"auto"`` uses ICU when PyICU is importable and the
            rule-based fallback otherwise. ``"icu"`` asks for ICU explicitly
            (a warning is logged if it is missing). ``"fallback"`` never
            probes for ICU.
        locales: Locales for which an ICU word break iterator is created.
        patch_word_at: Install the CJK word-lookup override on load.
    """

    cache_size: int = CACHE_MAX
    segmenter: SegmenterChoice = "auto"
    locales: tuple[str, ...] = SUPPORTED_LOCALES
    patch_word_at: bool = True

    def __post_init__(self) -> None:
        if self.cache_size < 1:
            raise ValueError(f"cache_size must be at least 1, got {self.cache_size}")
        if self.segmenter not in ("auto", "icu", "fallback"):
            raise ValueError(
                f"Unknown segmenter '{self.segmenter}'. "
                "Expected one of: auto, icu, fallback"
            )
        if not self.locales:
            raise ValueError("locales must name at least one locale")
        for locale in self.locales:
            if locale not in SUPPORTED_LOCALES:
                raise ValueError(
                    f"Locale '{locale}' is not supported. "
                    f"Supported locales: {list(SUPPORTED_LOCALES)}"
                )
