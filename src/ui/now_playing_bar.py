# ui/now_playing_bar.py
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QProgressBar

from core.models import SongInfo
from core.utils import format_ms


class NowPlayingBar(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)

        self._duration_ms = 0

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 6, 8, 6)
        root.setSpacing(4)

        # --- labels ---
        self.lbl_title = QLabel("Nothing playing")
        self.lbl_title.setObjectName("NowPlaying")
        self.lbl_title.setTextInteractionFlags(Qt.TextSelectableByMouse)

        self.lbl_artist = QLabel("")
        self.lbl_album = QLabel("")

        root.addWidget(self.lbl_title)
        root.addWidget(self.lbl_artist)
        root.addWidget(self.lbl_album)

        # --- progress ---
        row = QHBoxLayout()
        row.setSpacing(10)

        self.lbl_time = QLabel("0:00")
        self.lbl_dur = QLabel("0:00")

        self.progress = QProgressBar()
        self.progress.setObjectName("SongProgress")
        self.progress.setTextVisible(False)
        self.progress.setRange(0, 1000)
        self.progress.setValue(0)

        row.addWidget(self.lbl_time)
        row.addWidget(self.progress, 1)
        row.addWidget(self.lbl_dur)
        root.addLayout(row)

        self.setObjectName("NowPlayingBar")
        self._apply_styles()

    # --- orchestrator updates ---
    def set_song_info(self, info: SongInfo):
        self.lbl_title.setText(info.track_name or "-")
        self.lbl_artist.setText(info.artist_name or "-")
        self.lbl_album.setText(info.album or "-")

        self._duration_ms = max(0, int(info.duration_ms))
        self.lbl_dur.setText(format_ms(self._duration_ms))
        self.set_position(info.position_ms)

    def set_position(self, ms: int):
        self.lbl_time.setText(format_ms(ms))
        if self._duration_ms > 0:
            # estimate may run slightly past the end
            ratio = min(max(ms, 0) / self._duration_ms, 1.0)
            self.progress.setValue(int(ratio * 1000))

    def clear(self):
        self._duration_ms = 0
        self.lbl_title.setText("No song playing")
        self.lbl_artist.setText("")
        self.lbl_album.setText("")
        self.lbl_time.setText("0:00")
        self.lbl_dur.setText("0:00")
        self.progress.setValue(0)

    def _apply_styles(self):
        self.setStyleSheet("""
        QWidget#NowPlayingBar {
            background-color: #020617;
            border-top: 1px solid #111827;
        }

        QLabel {
            color: #9ca3af;
            font-size: 11px;
        }
        QLabel#NowPlaying {
            color: #e5e7eb;
            font-size: 13px;
            font-weight: 650;
        }

        QProgressBar#SongProgress {
            background: #0b1222;
            border: 1px solid #1f2937;
            border-radius: 999px;
            height: 6px;
        }
        QProgressBar#SongProgress::chunk {
            border-radius: 999px;
            background: #38bdf8;
        }
        """)
