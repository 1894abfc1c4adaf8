# sync/orchestrator.py
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from core.config import LEAD_OFFSET_S, TICK_INTERVAL_MS
from core.lrc_parser import parse
from core.models import LyricsDocument, PlaybackSample, SongInfo
from sync import clock
from sync.cursor import LyricsCursor
from sync.session_cache import LyricsCache

logger = logging.getLogger(__name__)

NOTHING_PLAYING_TEXT = "No song is currently playing"


class SyncOrchestrator(QObject):
    """
    Ties samples, lyrics and the local tick together.

    Every entry point (on_sample, on_sample_failed, on_lookup_finished,
    on_tick) runs on the thread that owns this object. Background work
    reports back through queued signal connections, so state is never
    mutated from a worker thread.

    Lookups are not performed here: `lookup_requested` is emitted and the
    result must come back through `on_lookup_finished`.
    """
    # display sink
    status = Signal(str)
    song_info = Signal(object)          # SongInfo
    lyrics_ready = Signal(object)       # LyricsDocument
    line_changed = Signal(int)
    fetching_lyrics = Signal()
    nothing_playing = Signal()
    progress = Signal(int)              # estimated position, ms

    lookup_requested = Signal(str, str, str)   # track_id, track_name, artist_name

    def __init__(
        self,
        cache: LyricsCache | None = None,
        lead_offset: float = LEAD_OFFSET_S,
        tick_interval_ms: int = TICK_INTERVAL_MS,
        now: Callable[[], float] = time.monotonic,
        parent=None,
    ):
        super().__init__(parent)
        self.cache = cache if cache is not None else LyricsCache()
        self.cursor = LyricsCursor(lead_offset)
        self._now = now

        self.active_track_id: Optional[str] = None
        self.estimate: Optional[clock.PlaybackEstimate] = None
        self.document: Optional[LyricsDocument] = None
        self._sample: Optional[PlaybackSample] = None
        self._in_flight: set[str] = set()

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(tick_interval_ms)
        self._tick_timer.timeout.connect(self.on_tick)

    # --- lifecycle ---
    def start(self) -> None:
        self._tick_timer.start()

    def stop(self) -> None:
        self._tick_timer.stop()

    @property
    def is_tracking(self) -> bool:
        return self.active_track_id is not None

    @property
    def current_index(self) -> int:
        return self.cursor.current_index

    # --- authoritative samples ---
    @Slot(object)
    def on_sample(self, sample: Optional[PlaybackSample]) -> None:
        if sample is None:
            self._go_idle()
            return

        if not self.is_tracking and not sample.is_playing:
            logger.debug("Ignoring paused sample while idle: %s", sample.track_id)
            return

        self.song_info.emit(SongInfo.from_sample(sample))

        if sample.track_id != self.active_track_id:
            self._start_track(sample)
            return

        # same track: new anchor only
        self._sample = sample
        self.estimate = clock.reset(sample.track_id, sample.position_seconds, sample.is_playing, self._now())

    @Slot(str)
    def on_sample_failed(self, message: str) -> None:
        # previous Tracking/Idle state is kept as is
        logger.warning("Playback sample failed: %s", message)
        self.status.emit(message)

    # --- lyrics lookups ---
    @Slot(str, object, str)
    def on_lookup_finished(self, track_id: str, raw: Optional[str], error: str = "") -> None:
        self._in_flight.discard(track_id)

        if error:
            logger.warning("Lyrics lookup failed for %s: %s", track_id, error)
            doc = LyricsDocument.absent()
        else:
            doc = parse(raw)
        self.cache.put(track_id, doc)

        if track_id != self.active_track_id:
            logger.info("Dropping stale lyrics result for %s (active: %s)", track_id, self.active_track_id)
            return
        if self.document is not None:
            return

        self._install(doc, lookup_failed=bool(error))

    # --- local tick ---
    @Slot()
    def on_tick(self) -> None:
        if not self.is_tracking or self.estimate is None or not self.estimate.is_playing:
            return

        position = clock.estimate(self.estimate, self._now())
        self.progress.emit(int(position * 1000))

        doc = self.document
        if doc is None or not doc.is_synced:
            return

        idx, changed = self.cursor.advance(doc.lines, position)
        if changed:
            self.line_changed.emit(idx)

    # --- internal helpers ---
    def _start_track(self, sample: PlaybackSample) -> None:
        track_id = sample.track_id
        self.active_track_id = track_id
        self._sample = sample
        self.document = None
        self.cursor.reset()
        self.estimate = clock.reset(track_id, sample.position_seconds, sample.is_playing, self._now())

        self.status.emit(self._now_playing_text())

        cached = self.cache.get(track_id)
        if cached is not None:
            logger.info("Using cached lyrics for %s", track_id)
            self._install(cached)
            return

        self.fetching_lyrics.emit()
        if track_id in self._in_flight:
            logger.debug("Lookup already pending for %s", track_id)
            return
        self._in_flight.add(track_id)
        logger.info("Looking up lyrics for %r by %r", sample.track_name, sample.artist_name)
        self.lookup_requested.emit(track_id, sample.track_name, sample.artist_name)

    def _install(self, doc: LyricsDocument, lookup_failed: bool = False) -> None:
        self.document = doc
        self.cursor.reset()
        self.lyrics_ready.emit(doc)

        if lookup_failed:
            self.status.emit(self._now_playing_text("Error fetching lyrics"))
        elif doc.is_absent:
            self.status.emit(self._now_playing_text("Lyrics not found"))
        else:
            self.status.emit(self._now_playing_text())

    def _go_idle(self) -> None:
        if not self.is_tracking:
            return
        logger.info("Nothing playing; leaving %s", self.active_track_id)
        self.active_track_id = None
        self._sample = None
        self.estimate = None
        self.document = None
        self.cursor.reset()
        self.nothing_playing.emit()
        self.status.emit(NOTHING_PLAYING_TEXT)

    def _now_playing_text(self, note: str | None = None) -> str:
        s = self._sample
        text = f"Now playing: {s.track_name} by {s.artist_name}" if s else ""
        if note:
            text += f" ({note})"
        return text
