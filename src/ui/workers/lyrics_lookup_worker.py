# ui/workers/lyrics_lookup_worker.py
from __future__ import annotations

from PySide6.QtCore import QThread, Signal

from core.lrclib_client import LrcLibClient


class LyricsLookupWorker(QThread):
    resolved = Signal(str, object, str)  # track_id, raw lyrics | None, error message

    def __init__(self, client: LrcLibClient, track_id: str, track_name: str, artist_name: str, parent=None):
        super().__init__(parent)
        self.client = client
        self.track_id = track_id
        self.track_name = (track_name or "").strip()
        self.artist_name = (artist_name or "").strip()

    def run(self):
        if not self.track_name:
            self.resolved.emit(self.track_id, None, "")
            return

        try:
            raw = self.client.lookup(self.track_name, self.artist_name)
        except Exception as e:
            self.resolved.emit(self.track_id, None, f"Lookup failed: {e}")
            return

        self.resolved.emit(self.track_id, raw, "")
