"""Test configuration and fixtures.

Provides reusable fixtures for:
- A QCoreApplication so QObject signals/timers can be created
- Playback samples and LRC payloads
- A fake wall clock for the orchestrator
"""

import pytest
from PySide6.QtCore import QCoreApplication

from core.models import PlaybackSample


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.t = start

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def make_sample():
    def _make(track_id="X", position_ms=0, is_playing=True, track_name=None, artist="Artist"):
        return PlaybackSample(
            is_playing=is_playing,
            track_id=track_id,
            track_name=track_name or f"Song {track_id}",
            artist_name=artist,
            artists=(artist,),
            album_name="Album",
            position_ms=position_ms,
            duration_ms=200_000,
        )
    return _make


@pytest.fixture
def sample_lrc():
    return (
        "[ar: Artist]\n"
        "[ti: Song X]\n"
        "[00:00.00]First line\n"
        "[00:10.00]Second line\n"
        "[00:20.00]\n"
        "[00:30.50]Fourth line\n"
    )
