import pytest

from pybamboo.config import BambooConfig
from pybamboo.service import SegmenterService
from pybamboo.types import Segment


@pytest.fixture
def service():
    """Service pinned to the rule-based segmenter for deterministic results."""
    return SegmenterService(BambooConfig(segmenter="fallback"))


class TableSegmenter:
    """Segments known texts from a fixed word list, others as one word."""

    name = "table"

    def __init__(self, table: dict[str, list[str]]) -> None:
        self.table = table
        self.calls: list[str] = []

    def segment(self, text: str) -> list[Segment]:
        self.calls.append(text)
        words = self.table.get(text, [text] if text else [])
        out = []
        cursor = 0
        for word in words:
            out.append(
                Segment(
                    char_start=cursor,
                    char_end=cursor + len(word),
                    is_word_like=bool(word.strip()) and word not in "，。！？、",
                    text=word,
                )
            )
            cursor += len(word)
        return out


@pytest.fixture
def table_segmenter():
    return TableSegmenter
