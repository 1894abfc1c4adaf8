# sync/cursor.py
from __future__ import annotations

from typing import Sequence, Tuple

from core.config import LEAD_OFFSET_S
from core.models import LyricsLine


class LyricsCursor:
    """
    Tracks which lyrics line is current for an estimated position.

    `lines` must be sorted by offset; unsorted input gives undefined
    (but non-failing) results.
    """

    def __init__(self, lead_offset: float = LEAD_OFFSET_S):
        self.lead_offset = lead_offset
        self.current_index: int = -1

    def reset(self) -> None:
        self.current_index = -1

    def index_for(self, lines: Sequence[LyricsLine], estimated_position: float) -> int:
        threshold = estimated_position + self.lead_offset
        idx = -1
        for i, line in enumerate(lines):
            if line.offset_seconds <= threshold:
                idx = i
            else:
                break
        return idx

    def advance(self, lines: Sequence[LyricsLine], estimated_position: float) -> Tuple[int, bool]:
        idx = self.index_for(lines, estimated_position)
        if idx == self.current_index:
            return idx, False
        self.current_index = idx
        return idx, True
