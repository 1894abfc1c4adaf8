# core/models.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


class LyricsKind(Enum):
    SYNCED = auto()
    PLAIN = auto()
    ABSENT = auto()


@dataclass(frozen=True)
class LyricsLine:
    offset_seconds: float
    text: str   # "" marks an instrumental pause


@dataclass(frozen=True)
class LyricsDocument:
    """
    Result of one lyrics resolution for a track.

    SYNCED carries `lines` (may be empty, see lrc_parser.parse) and
    the raw LRC in `text`,
    PLAIN carries `text`, ABSENT carries nothing and means
    "looked up, found nothing".
    """
    kind: LyricsKind
    lines: Tuple[LyricsLine, ...] = ()
    text: Optional[str] = None

    @classmethod
    def synced(cls, lines, text: Optional[str] = None) -> "LyricsDocument":
        return cls(kind=LyricsKind.SYNCED, lines=tuple(lines), text=text)

    @classmethod
    def plain(cls, text: str) -> "LyricsDocument":
        return cls(kind=LyricsKind.PLAIN, text=text)

    @classmethod
    def absent(cls) -> "LyricsDocument":
        return cls(kind=LyricsKind.ABSENT)

    @property
    def is_synced(self) -> bool:
        return self.kind is LyricsKind.SYNCED

    @property
    def is_absent(self) -> bool:
        return self.kind is LyricsKind.ABSENT


@dataclass(frozen=True)
class PlaybackSample:
    """One authoritative snapshot of the remote player."""
    is_playing: bool
    track_id: str
    track_name: str
    artist_name: str              # first artist, used for lookups
    artists: Tuple[str, ...] = ()
    album_name: str = ""
    position_ms: int = 0
    duration_ms: int = 0

    @property
    def position_seconds(self) -> float:
        return self.position_ms / 1000.0

    def all_artists(self) -> str:
        return ", ".join(self.artists) if self.artists else self.artist_name


@dataclass(frozen=True)
class SongInfo:
    track_name: str
    artist_name: str
    album: str
    duration_ms: int
    position_ms: int
    is_playing: bool

    @classmethod
    def from_sample(cls, sample: PlaybackSample) -> "SongInfo":
        return cls(
            track_name=sample.track_name,
            artist_name=sample.all_artists(),
            album=sample.album_name,
            duration_ms=sample.duration_ms,
            position_ms=sample.position_ms,
            is_playing=sample.is_playing,
        )
