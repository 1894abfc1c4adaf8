from core.models import LyricsLine
from sync.cursor import LyricsCursor

LINES = [LyricsLine(0.0, "a"), LyricsLine(10.0, "b"), LyricsLine(20.0, "c")]


def test_lead_offset_boundaries():
    cur = LyricsCursor(lead_offset=0.5)
    assert cur.advance(LINES, 9.4) == (0, True)
    assert cur.advance(LINES, 9.6) == (1, True)
    assert cur.advance(LINES, 20.6) == (2, True)


def test_no_change_reported_at_same_line():
    cur = LyricsCursor(lead_offset=0.5)
    assert cur.advance(LINES, 1.0) == (0, True)
    assert cur.advance(LINES, 1.1) == (0, False)
    assert cur.advance(LINES, 5.0) == (0, False)


def test_before_first_line():
    lines = [LyricsLine(5.0, "late start")]
    cur = LyricsCursor(lead_offset=0.5)
    assert cur.advance(lines, 1.0) == (-1, False)
    assert cur.current_index == -1
    assert cur.advance(lines, 4.6) == (0, True)


def test_reset_makes_zero_offset_line_a_transition():
    cur = LyricsCursor(lead_offset=0.5)
    cur.advance(LINES, 0.0)
    cur.reset()
    assert cur.current_index == -1
    assert cur.advance(LINES, 0.0) == (0, True)


def test_empty_lines():
    cur = LyricsCursor()
    assert cur.advance([], 100.0) == (-1, False)


def test_backwards_seek():
    cur = LyricsCursor(lead_offset=0.5)
    cur.advance(LINES, 25.0)
    assert cur.advance(LINES, 3.0) == (0, True)


def test_equal_offsets_pick_last_in_source_order():
    lines = [LyricsLine(0.0, "a"), LyricsLine(5.0, "b1"), LyricsLine(5.0, "b2"), LyricsLine(9.0, "c")]
    cur = LyricsCursor(lead_offset=0.5)
    assert cur.advance(lines, 5.0) == (2, True)


def test_default_lead_offset_comes_from_config():
    from core.config import LEAD_OFFSET_S

    cur = LyricsCursor()
    assert cur.lead_offset == LEAD_OFFSET_S == 0.5
    assert cur.advance(LINES, 9.6) == (1, True)
