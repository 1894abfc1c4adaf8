# ui/lyrics_view.py
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QStackedWidget,
    QTextEdit, QTableWidget, QTableWidgetItem, QAbstractItemView
)

from core.lrc_parser import strip_timestamps
from core.models import LyricsDocument, LyricsKind
from core.utils import format_offset

PAUSE_MARK = "♪"


class LyricsView(QWidget):
    """
    Lyrics panel:
      - synced: table (Time | Text), current row highlighted and centred
      - plain: read-only QTextEdit
      - none / not found / fetching: message
    """

    def __init__(self, parent=None):
        super().__init__(parent)

        self._current_index: int = -1

        root = QVBoxLayout(self)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(8)

        self.stack = QStackedWidget()
        root.addWidget(self.stack, 1)

        self.msg = QLabel("No lyrics")
        self.msg.setAlignment(Qt.AlignCenter)
        self.msg.setWordWrap(True)
        self.msg.setObjectName("LyricsMessage")
        self.stack.addWidget(self.msg)

        self.plain = QTextEdit()
        self.plain.setReadOnly(True)
        self.stack.addWidget(self.plain)

        self.table = QTableWidget(0, 2)
        self.table.setHorizontalHeaderLabels(["Time", "Text"])
        self.table.verticalHeader().setVisible(False)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setFocusPolicy(Qt.NoFocus)
        self.table.setColumnWidth(0, 95)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.stack.addWidget(self.table)

        self.setStyleSheet("""
        QLabel#LyricsMessage { color: #9ca3af; font-size: 13px; }
        QTableWidget { font-size: 14px; }
        QTableWidget::item:selected { background: #0b1222; color: #38bdf8; font-weight: 650; }
        """)

        self.show_none("Nothing playing")

    # --- public API ---
    def show_none(self, message: str):
        self._reset_state()
        self.msg.setText(message)
        self.stack.setCurrentWidget(self.msg)

    def show_document(self, doc: LyricsDocument):
        if doc.kind is LyricsKind.ABSENT:
            self.show_none("Lyrics not found for this song.")
            return

        if doc.kind is LyricsKind.PLAIN:
            self._reset_state()
            self.plain.setPlainText(doc.text or "")
            self.stack.setCurrentWidget(self.plain)
            return

        self._set_synced(doc)

    def set_current_line(self, idx: int):
        if self.stack.currentWidget() is not self.table:
            return
        if idx == self._current_index:
            return
        self._current_index = idx

        if idx < 0 or idx >= self.table.rowCount():
            self.table.clearSelection()
            return

        self.table.selectRow(idx)
        self.table.scrollToItem(self.table.item(idx, 1), QAbstractItemView.ScrollHint.PositionAtCenter)

    # --- internal helpers ---
    def _reset_state(self):
        self._current_index = -1
        self.table.clearSelection()
        self.table.setRowCount(0)

    def _set_synced(self, doc: LyricsDocument):
        self._reset_state()

        if not doc.lines:
            # tags present but none at a line start; show the words untimed
            words = strip_timestamps(doc.text)
            if not words:
                self.show_none("Synced lyrics contain no timed lines.")
                return
            self.plain.setPlainText(words)
            self.stack.setCurrentWidget(self.plain)
            return

        self.table.setRowCount(len(doc.lines))
        for row, line in enumerate(doc.lines):
            it_time = QTableWidgetItem(format_offset(line.offset_seconds))
            it_text = QTableWidgetItem(line.text or PAUSE_MARK)
            self.table.setItem(row, 0, it_time)
            self.table.setItem(row, 1, it_text)

        self.stack.setCurrentWidget(self.table)
        self.table.scrollToTop()
