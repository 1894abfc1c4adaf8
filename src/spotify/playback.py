# spotify/playback.py
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThread, QTimer, Signal

from core.config import POLL_INTERVAL_MS
from core.exceptions import PlaybackUnavailable
from spotify.auth import SpotifyAuth
from spotify.client import SpotifyClient, fetch_sample

logger = logging.getLogger(__name__)


class PlaybackPollWorker(QThread):
    sampled = Signal(object)    # PlaybackSample | None
    failed = Signal(str)        # user-facing message

    def __init__(self, client: SpotifyClient, auth: SpotifyAuth, parent=None):
        super().__init__(parent)
        self.client = client
        self.auth = auth

    def run(self):
        try:
            sample = fetch_sample(self.client, self.auth)
        except PlaybackUnavailable as e:
            self.failed.emit(str(e))
            return
        except Exception as e:
            logger.exception("Unexpected error while polling Spotify")
            self.failed.emit(f"Error fetching currently playing song: {e}")
            return
        self.sampled.emit(sample)


class SpotifyPlayback(QObject):
    """
    Authoritative sample source.

    A QTimer fires every poll interval; each poll runs in its own
    QThread and reports back through `sampled` / `failed`. A tick that
    arrives while a poll is still in flight is skipped.
    """
    sampled = Signal(object)    # PlaybackSample | None
    failed = Signal(str)

    def __init__(self, client: SpotifyClient, auth: SpotifyAuth, interval_ms: int = POLL_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self.client = client
        self.auth = auth

        self._worker: Optional[PlaybackPollWorker] = None

        self._poll_timer = QTimer(self)
        self._poll_timer.setInterval(interval_ms)
        self._poll_timer.timeout.connect(self.poll_now)

    def is_active(self) -> bool:
        return self._poll_timer.isActive()

    def start(self) -> None:
        """Start periodic polling and trigger the first poll immediately."""
        self._poll_timer.start()
        self.poll_now()

    def stop(self) -> None:
        self._poll_timer.stop()

    def shutdown(self) -> None:
        """Stop polling and block until an in-flight poll has returned."""
        self.stop()
        worker = self._worker
        if worker is not None and worker.isRunning():
            # bounded by the HTTP timeout
            worker.wait()

    def poll_now(self) -> None:
        if not self.auth.is_authenticated:
            return
        if self._worker is not None and self._worker.isRunning():
            logger.debug("Previous poll still running; skipping")
            return

        worker = PlaybackPollWorker(self.client, self.auth, self)
        worker.sampled.connect(self.sampled)
        worker.failed.connect(self.failed)
        worker.finished.connect(self._on_worker_done)
        self._worker = worker
        worker.start()

    def _on_worker_done(self) -> None:
        worker = self.sender()
        if worker is self._worker:
            self._worker = None
        if worker is not None:
            worker.deleteLater()
