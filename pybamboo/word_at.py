"""CJK-aware "word at position" lookup and its reversible host override.

``CjkWordLookup`` is a plain strategy that can be injected wherever a word
lookup is consumed. ``WordAtPatch`` is the single registration point for hosts
that only expose the lookup as a method: install once, uninstall once.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from operator import attrgetter
from typing import TYPE_CHECKING, Any

from .boundary import find_segment_at
from .editor import SelectionRange
from .script import is_cjk

if TYPE_CHECKING:
    from .document import Document
    from .service import SegmenterService

logger = logging.getLogger(__name__)

WordLookup = Callable[["Document", int], "SelectionRange | None"]


class CjkWordLookup:
    """Return the segment under ``pos`` when the position touches CJK text.

    Falls back to ``fallback`` when neither neighbouring character is CJK, or
    when the containing segment is not word-like (punctuation, spaces).

    Args:
        service: Segmenter service used for line segments
        fallback: The host's original word lookup
    """

    def __init__(self, service: SegmenterService, fallback: WordLookup) -> None:
        self.service = service
        self.fallback = fallback

    def __call__(self, doc: Document, pos: int) -> SelectionRange | None:
        line = doc.line_at(pos)
        local_pos = pos - line.start
        left = line.text[local_pos - 1] if local_pos > 0 else ""
        right = line.text[local_pos] if local_pos < len(line.text) else ""
        if not is_cjk(left) and not is_cjk(right):
            return self.fallback(doc, pos)

        found = find_segment_at(self.service.segments_for(line.text), local_pos)
        if found is None or not found.is_word_like:
            return self.fallback(doc, pos)
        return SelectionRange(
            anchor=line.start + found.char_start, head=line.start + found.char_end
        )


class WordAtPatch:
    """Reversibly replace a host's ``word_at(pos)`` method.

    The patched method reads the document from the host instance through
    ``doc_getter`` (``host.doc`` by default) and routes the lookup through
    ``CjkWordLookup``, with the original method as the fallback.

    Args:
        owner: Host class whose instances expose the word lookup method
        service: Segmenter service used for line segments
        attribute: Name of the method to replace
        doc_getter: Returns the ``Document`` for a host instance
    """

    def __init__(
        self,
        owner: Any,
        service: SegmenterService,
        *,
        attribute: str = "word_at",
        doc_getter: Callable[[Any], Document] = attrgetter("doc"),
    ) -> None:
        self.owner = owner
        self.service = service
        self.attribute = attribute
        self.doc_getter = doc_getter
        self._original: Any = None
        self._owned = False
        self._installed = False

    @property
    def installed(self) -> bool:
        return self._installed

    def _build_wrapper(self, original: Callable[..., Any]) -> Callable[..., Any]:
        doc_getter = self.doc_getter
        service = self.service

        @functools.wraps(original)
        def word_at(host: Any, pos: int) -> Any:
            lookup = CjkWordLookup(service, lambda _doc, _pos: original(host, _pos))
            return lookup(doc_getter(host), pos)

        return word_at

    def install(self) -> bool:
        """Install the override.

        Returns:
            True if the override is active. False if patching failed, in
            which case the original method is left in place.

        Raises:
            RuntimeError: If the override is already installed
        """
        if self._installed:
            raise RuntimeError(f"{self.attribute} override is already installed")

        owned = self.attribute in vars(self.owner)
        original = None
        try:
            original = getattr(self.owner, self.attribute)
            setattr(self.owner, self.attribute, self._build_wrapper(original))
        except Exception:
            logger.warning(
                "Failed to override %s.%s, keeping original behavior",
                getattr(self.owner, "__name__", type(self.owner).__name__),
                self.attribute,
                exc_info=True,
            )
            if original is not None and (
                getattr(self.owner, self.attribute, None) is not original
            ):
                self._restore(original, owned)
            return False

        self._original = original
        self._owned = owned
        self._installed = True
        logger.debug("Installed CJK %s override", self.attribute)
        return True

    def uninstall(self) -> None:
        """Restore the original method. Further calls do nothing."""
        if not self._installed:
            return
        self._restore(self._original, self._owned)
        self._original = None
        self._installed = False
        logger.debug("Restored original %s", self.attribute)

    def _restore(self, original: Any, owned: bool) -> None:
        if owned:
            setattr(self.owner, self.attribute, original)
        elif self.attribute in vars(self.owner):
            # The method was inherited; drop the override to expose it again
            delattr(self.owner, self.attribute)

    def __enter__(self) -> WordAtPatch:
        self.install()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.uninstall()
