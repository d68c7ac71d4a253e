"""pybamboo - CJK-aware word boundaries for text editors."""

from .boundary import BoundaryEngine, find_segment_at, has_cjk_around
from .commands import delete_by_segment, move_by_segment
from .config import BambooConfig
from .document import Line, TextDocument
from .drag import DragSelectionController
from .plugin import BambooPlugin
from .service import SegmenterService
from .types import Segment
from .word_at import CjkWordLookup, WordAtPatch

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "BambooConfig",
    "BambooPlugin",
    "BoundaryEngine",
    "CjkWordLookup",
    "DragSelectionController",
    "Line",
    "Segment",
    "SegmenterService",
    "TextDocument",
    "WordAtPatch",
    "delete_by_segment",
    "find_segment_at",
    "has_cjk_around",
    "move_by_segment",
]
