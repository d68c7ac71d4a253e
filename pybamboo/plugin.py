from __future__ import annotations

import logging
from typing import Any

from .config import BambooConfig
from .keymap import BambooExtension, create_extension
from .service import SegmenterService
from .word_at import WordAtPatch

logger = logging.getLogger(__name__)


class BambooPlugin:
    """Owns the segmenter service and everything registered with the host.

    ``load`` builds the service and the editor extension and, when a host
    class is given, installs the CJK word lookup on it. ``unload`` undoes
    all of it.
    """

    def __init__(self, config: BambooConfig | None = None) -> None:
        self.config = config or BambooConfig()
        self.service: SegmenterService | None = None
        self.extension: BambooExtension | None = None
        self._word_at_patch: WordAtPatch | None = None

    def __enter__(self) -> BambooPlugin:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unload()

    @property
    def loaded(self) -> bool:
        return self.service is not None

    def load(self, word_at_owner: Any | None = None) -> BambooExtension:
        """Create the service and extension for the host to register.

        Args:
            word_at_owner: Host class whose ``word_at`` method should respect
                CJK segments. Skipped when None or when
                ``config.patch_word_at`` is False.

        Raises:
            RuntimeError: If the plugin is already loaded
        """
        if self.loaded:
            raise RuntimeError("BambooPlugin is already loaded")

        self.service = SegmenterService(self.config)
        self.extension = create_extension(self.service)
        if word_at_owner is not None and self.config.patch_word_at:
            patch = WordAtPatch(word_at_owner, self.service)
            if patch.install():
                self._word_at_patch = patch
        logger.debug("Loaded with %s segmenter", self.service.segmenter.name)
        return self.extension

    def unload(self) -> None:
        if self._word_at_patch is not None:
            self._word_at_patch.uninstall()
            self._word_at_patch = None
        if self.service is not None:
            self.service.clear()
        self.service = None
        self.extension = None
