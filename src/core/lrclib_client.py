from __future__ import annotations

import logging
from typing import Optional

import requests

from core.exceptions import LookupFailure

logger = logging.getLogger(__name__)


def _lyrics_of(item: dict) -> Optional[str]:
    # prefer synced over plain
    return item.get("syncedLyrics") or item.get("plainLyrics") or None


def pick_candidate(results: list[dict], track: str, artist: str) -> Optional[str]:
    """
    Choose the lyrics text among LRCLIB search results.

    1) first result with lyrics whose track and artist names contain the
       requested ones (case-insensitive)
    2) otherwise the first result with any lyrics
    """
    with_lyrics = [r for r in results if isinstance(r, dict) and _lyrics_of(r)]

    track_l = track.lower()
    artist_l = artist.lower()
    for item in with_lyrics:
        if track_l in (item.get("trackName") or "").lower() and artist_l in (item.get("artistName") or "").lower():
            return _lyrics_of(item)

    if with_lyrics:
        return _lyrics_of(with_lyrics[0])
    return None


class LrcLibClient:
    def __init__(
        self,
        base_url: str = "https://lrclib.net",
        user_agent: str = "synclyrics/0.1",
        timeout_s: float = 15.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    def search(self, query: str) -> list[dict]:
        # GET /api/search?q=...
        try:
            r = self.session.get(f"{self.base_url}/api/search", params={"q": query}, timeout=self.timeout_s)
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            raise LookupFailure(f"LRCLIB search failed: {e}") from e

        if not isinstance(data, list):
            raise LookupFailure(f"LRCLIB search returned {type(data).__name__}, expected a list")
        return data

    def lookup(self, track_name: str, artist_name: str) -> Optional[str]:
        """Raw lyrics text for a track, or None when no candidate carries lyrics."""
        results = self.search(f"{track_name} {artist_name}")
        lyrics = pick_candidate(results, track_name, artist_name)
        logger.debug("LRCLIB: %d results for %r / %r, match=%s", len(results), track_name, artist_name, lyrics is not None)
        return lyrics
