from __future__ import annotations

import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QPushButton, QHBoxLayout, QToolButton, QStyle
)
from PySide6.QtCore import Qt, QTimer, QUrl
from PySide6.QtGui import QDesktopServices, QShortcut, QKeySequence

from core.exceptions import ConfigError
from spotify.playback import SpotifyPlayback
from sync.orchestrator import SyncOrchestrator
from ui.lyrics_view import LyricsView
from ui.now_playing_bar import NowPlayingBar
from ui.workers.auth_callback_worker import AuthCallbackWorker
from ui.workers.lyrics_lookup_worker import LyricsLookupWorker

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, app_state):
        super().__init__()
        self.setWindowTitle("SyncLyrics")
        self.resize(480, 640)
        self.app_state = app_state
        cfg = app_state.config

        self.orchestrator = SyncOrchestrator(
            lead_offset=cfg.lead_offset_s,
            tick_interval_ms=cfg.tick_interval_ms,
            parent=self,
        )
        self.playback = SpotifyPlayback(app_state.spotify, app_state.auth, cfg.poll_interval_ms, self)

        self._lookup_workers: list[LyricsLookupWorker] = []
        self._auth_worker: AuthCallbackWorker | None = None

        # --- Shortcuts ---
        QShortcut(QKeySequence("F5"), self, activated=self.refresh_now)
        QShortcut(QKeySequence("Ctrl+T"), self, activated=lambda: self.btn_pin.toggle())

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)

        # --- Top bar (login + actions) ---
        top_bar = QHBoxLayout()

        self.btn_login = QPushButton("Log in with Spotify")
        self.btn_login.clicked.connect(self.start_login)
        top_bar.addWidget(self.btn_login)

        self.lbl_auth = QLabel("")
        self.lbl_auth.setObjectName("AuthStatus")
        self.lbl_auth.setVisible(False)
        top_bar.addWidget(self.lbl_auth)
        top_bar.addStretch(1)

        self.btn_refresh = QToolButton()
        self.btn_refresh.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_BrowserReload))
        self.btn_refresh.setToolTip("Fetch current song")
        self.btn_refresh.setVisible(False)
        self.btn_refresh.clicked.connect(self.refresh_now)

        self.btn_pin = QToolButton()
        self.btn_pin.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_TitleBarShadeButton))
        self.btn_pin.setToolTip("Always on top")
        self.btn_pin.setCheckable(True)
        self.btn_pin.toggled.connect(self._set_always_on_top)

        top_bar.addWidget(self.btn_refresh)
        top_bar.addWidget(self.btn_pin)
        self.layout.addLayout(top_bar)

        # --- Status + song info + lyrics ---
        self.lbl_status = QLabel("")
        self.lbl_status.setObjectName("StatusMessage")
        self.lbl_status.setWordWrap(True)
        self.layout.addWidget(self.lbl_status)

        self.now_playing = NowPlayingBar(self)
        self.layout.addWidget(self.now_playing)

        self.lyrics_view = LyricsView(self)
        self.layout.addWidget(self.lyrics_view, 1)

        # --- Sync wiring ---
        self.playback.sampled.connect(self.orchestrator.on_sample)
        self.playback.failed.connect(self.orchestrator.on_sample_failed)
        self.orchestrator.lookup_requested.connect(self._start_lookup)

        self.orchestrator.status.connect(self.lbl_status.setText)
        self.orchestrator.song_info.connect(self.now_playing.set_song_info)
        self.orchestrator.progress.connect(self.now_playing.set_position)
        self.orchestrator.lyrics_ready.connect(self.lyrics_view.show_document)
        self.orchestrator.line_changed.connect(self.lyrics_view.set_current_line)
        self.orchestrator.fetching_lyrics.connect(self._on_fetching_lyrics)
        self.orchestrator.nothing_playing.connect(self._on_nothing_playing)

        self.app_state.notification.connect(self._on_notify)

        # token expiry label refresh
        self._expiry_timer = QTimer(self)
        self._expiry_timer.setInterval(60_000)
        self._expiry_timer.timeout.connect(self._update_token_expiry)

        self.orchestrator.start()
        self.show_queued_notifications()

        self.setStyleSheet(self.styleSheet() + """
            QLabel#StatusMessage {
                color: #9ca3af;
                font-size: 11px;
            }
            QLabel#AuthStatus {
                color: #22c55e;
                font-size: 11px;
            }
            QToolButton {
                border: 1px solid transparent;
                background: transparent;
                padding: 6px;
                border-radius: 10px;
            }
            QToolButton:hover {
                background: #0b1222;
                border-color: #1f2937;
            }
            QToolButton:checked {
                background: #0f172a;
                border-color: #38bdf8;
            }
            """)

    # ------------------ notifications ------------------
    def show_queued_notifications(self):
        for n in self.app_state.queued_notifications:
            self._on_notify(n)
        self.app_state.queued_notifications.clear()

    def _on_notify(self, n):
        # n is core.state.Notify
        msg = getattr(n, "message", "") or ""
        if not msg:
            return
        kind = (getattr(n, "notify_type", "info") or "info").lower()
        self.statusBar().showMessage(msg, 8000 if kind == "error" else 4000)

    # ------------------ login ------------------
    def start_login(self):
        try:
            url = self.app_state.auth.authorize_url()
        except ConfigError as e:
            self.lbl_status.setText(str(e))
            self.app_state.notify(str(e), "error")
            return

        if self._auth_worker is not None and self._auth_worker.isRunning():
            # listener already waiting; just reopen the browser
            QDesktopServices.openUrl(QUrl(url))
            return

        self._auth_worker = AuthCallbackWorker(self.app_state.auth, self)
        self._auth_worker.login_finished.connect(self._on_login_finished)
        self._auth_worker.start()

        QDesktopServices.openUrl(QUrl(url))
        self.lbl_status.setText("Waiting for Spotify login in your browser...")

    def _on_login_finished(self, ok: bool, msg: str):
        if not ok:
            logger.warning("Spotify login failed: %s", msg)
            self.lbl_status.setText(msg or "Failed to authenticate with Spotify. Please try again.")
            self.lbl_auth.setText("Authentication failed")
            self.lbl_auth.setVisible(True)
            self.app_state.notify(msg, "error")
            return

        self.btn_login.setVisible(False)
        self.btn_refresh.setVisible(True)
        self.lbl_auth.setVisible(True)
        self._update_token_expiry()
        self._expiry_timer.start()

        self.lbl_status.setText("Connecting to Spotify...")
        self.app_state.notify("Logged in to Spotify", "success")
        self.playback.start()

    def _update_token_expiry(self):
        minutes = self.app_state.auth.minutes_left()
        if minutes is None:
            self.lbl_auth.setText("Logged in")
        elif minutes > 0:
            self.lbl_auth.setText(f"Logged in · token {minutes} minutes")
        else:
            self.lbl_auth.setText("Logged in · token Expired")

    # ------------------ sync display ------------------
    def refresh_now(self):
        self.playback.poll_now()

    def _on_fetching_lyrics(self):
        self.lbl_status.setText("Fetching lyrics...")
        self.lyrics_view.show_none("Fetching lyrics...")

    def _on_nothing_playing(self):
        self.now_playing.clear()
        self.lyrics_view.show_none("Nothing playing")

    def _start_lookup(self, track_id: str, track_name: str, artist_name: str):
        worker = LyricsLookupWorker(self.app_state.lrclib, track_id, track_name, artist_name, self)
        worker.resolved.connect(self.orchestrator.on_lookup_finished)
        worker.finished.connect(self._on_lookup_worker_done)
        self._lookup_workers.append(worker)
        worker.start()

    def _on_lookup_worker_done(self):
        worker = self.sender()
        if worker in self._lookup_workers:
            self._lookup_workers.remove(worker)
            worker.deleteLater()

    # ------------------ window ------------------
    def _set_always_on_top(self, on: bool):
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, on)
        # changing window flags hides the window
        self.show()

    def closeEvent(self, event):
        self.orchestrator.stop()
        self.playback.shutdown()
        self._expiry_timer.stop()
        # workers are children of this window; they must not outlive it while running
        for worker in list(self._lookup_workers):
            if worker.isRunning():
                worker.wait()
        if self._auth_worker is not None and self._auth_worker.isRunning():
            self._auth_worker.requestInterruption()
            self._auth_worker.wait()
        super().closeEvent(event)
