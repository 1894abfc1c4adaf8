# sync/session_cache.py
from __future__ import annotations

from typing import Dict, Optional

from core.models import LyricsDocument


class LyricsCache:
    """
    Per-run map of track id -> resolved LyricsDocument.

    get() returns None for "never looked up"; a cached ABSENT document
    means "looked up, nothing found". No eviction.
    """

    def __init__(self):
        self._docs: Dict[str, LyricsDocument] = {}

    def get(self, track_id: str) -> Optional[LyricsDocument]:
        return self._docs.get(track_id)

    def put(self, track_id: str, doc: LyricsDocument) -> None:
        self._docs[track_id] = doc

    def __contains__(self, track_id: str) -> bool:
        return track_id in self._docs

    def __len__(self) -> int:
        return len(self._docs)
