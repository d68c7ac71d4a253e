from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .boundary import BACKWARD, FORWARD
from .commands import Command, delete_by_segment, move_by_segment
from .constants import PRIMARY_BUTTON, WORD_CLICK_COUNT
from .drag import DragSelectionController

if TYPE_CHECKING:
    from collections.abc import Callable

    from .document import Document
    from .service import SegmenterService


@dataclass(frozen=True)
class KeyBinding:
    """A key binding in the host's key notation.

    ``mac`` overrides ``key`` on macOS. ``shift`` runs when the same key is
    pressed with Shift held.
    """

    key: str
    run: Command
    mac: str | None = None
    shift: Command | None = None

    def key_for(self, platform: str) -> str:
        if platform == "darwin" and self.mac:
            return self.mac
        return self.key

    def resolve(self, shift: bool = False) -> Command | None:
        if shift:
            return self.shift
        return self.run


@dataclass(frozen=True)
class BambooExtension:
    keymap: tuple[KeyBinding, ...]
    mouse_selection: Callable[..., DragSelectionController | None]

    def binding_for(self, key: str, platform: str) -> KeyBinding | None:
        for binding in self.keymap:
            if binding.key_for(platform) == key:
                return binding
        return None


def create_keymap(service: SegmenterService) -> tuple[KeyBinding, ...]:
    """Word navigation and deletion bindings.

    macOS uses Option+Arrow / Option+Backspace, other platforms Ctrl. The
    commands return False away from CJK text, so the host's own word
    commands still run there.
    """
    return (
        KeyBinding(
            key="Ctrl-ArrowLeft",
            mac="Alt-ArrowLeft",
            run=move_by_segment(service, BACKWARD, extend=False),
            shift=move_by_segment(service, BACKWARD, extend=True),
        ),
        KeyBinding(
            key="Ctrl-ArrowRight",
            mac="Alt-ArrowRight",
            run=move_by_segment(service, FORWARD, extend=False),
            shift=move_by_segment(service, FORWARD, extend=True),
        ),
        KeyBinding(
            key="Ctrl-Backspace",
            mac="Alt-Backspace",
            run=delete_by_segment(service, BACKWARD),
        ),
        KeyBinding(
            key="Ctrl-Delete",
            mac="Alt-Delete",
            run=delete_by_segment(service, FORWARD),
        ),
    )


def create_extension(service: SegmenterService) -> BambooExtension:
    def mouse_selection(
        doc: Document,
        pos: int | None,
        button: int = PRIMARY_BUTTON,
        click_count: int = WORD_CLICK_COUNT,
    ) -> DragSelectionController | None:
        controller = DragSelectionController(service)
        if not controller.begin(doc, pos, button=button, click_count=click_count):
            return None
        return controller

    return BambooExtension(
        keymap=create_keymap(service), mouse_selection=mouse_selection
    )
