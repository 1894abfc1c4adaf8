from core.models import LyricsDocument, LyricsKind, LyricsLine
from sync.session_cache import LyricsCache


def test_unknown_track_is_none():
    cache = LyricsCache()
    assert cache.get("nope") is None
    assert "nope" not in cache


def test_absent_is_cached_and_distinguishable():
    cache = LyricsCache()
    cache.put("X", LyricsDocument.absent())
    doc = cache.get("X")
    assert doc is not None
    assert doc.kind is LyricsKind.ABSENT
    assert "X" in cache


def test_put_overwrites_and_keeps_others():
    cache = LyricsCache()
    synced = LyricsDocument.synced([LyricsLine(0.0, "a")])
    cache.put("X", LyricsDocument.plain("words"))
    cache.put("Y", synced)
    cache.put("X", LyricsDocument.absent())
    assert cache.get("X").is_absent
    assert cache.get("Y") is synced
    assert len(cache) == 2
